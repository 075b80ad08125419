from __future__ import annotations


class MailInsightError(Exception):
    """Base class for errors raised by mail_insight."""


class EmptyInputError(MailInsightError, ValueError):
    def __init__(self, message: str = "Please enter or upload an email to parse.") -> None:
        super().__init__(message)


class AnalysisParseFailure(MailInsightError, ValueError):
    """Backend answered, but not with a structured object."""


class BackendUnavailable(MailInsightError, RuntimeError):
    """Backend could not produce a completion."""


class FetchFailure(MailInsightError, RuntimeError):
    """Mailbox collaborator could not deliver messages."""
