# backend/app/api/mailbox.py
from __future__ import annotations

from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from backend.app.api.dependencies import get_ai_client, get_session_path, get_settings
from backend.app.status import result_store
from mail_insight.config.settings import Settings
from mail_insight.errors import EmptyInputError, FetchFailure
from mail_insight.mailbox.service import fetch_recent
from mail_insight.mailbox.session import MailboxSession
from mail_insight.models import ConnectedEmail
from mail_insight.pipeline.orchestrator import process_connected_email
from mail_insight.storage.state import load_session, save_session

router = APIRouter()
# Emails from the most recent fetch, by id; analysis looks them up here.
_fetched: Dict[str, ConnectedEmail] = {}


class ConnectRequest(BaseModel):
    provider: str


@router.post("/mailbox/connect")
def connect_mailbox(payload: ConnectRequest, session_path: Path = Depends(get_session_path)) -> dict:
    try:
        session = MailboxSession.for_provider(payload.provider)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    save_session(session_path, session)
    _fetched.clear()
    return {"ok": True, "session": asdict(session)}


@router.get("/mailbox/session")
def mailbox_session(session_path: Path = Depends(get_session_path)) -> dict:
    return {"ok": True, "session": asdict(load_session(session_path))}


@router.get("/emails")
async def list_emails(
    count: int = Query(10, ge=1, le=50),
    session_path: Path = Depends(get_session_path),
) -> dict:
    session = load_session(session_path)
    if not session.connected:
        raise HTTPException(status_code=409, detail="No email provider connected.")

    try:
        emails = await run_in_threadpool(fetch_recent, session, count)
    except FetchFailure as exc:
        raise HTTPException(status_code=502, detail=str(exc)) from exc

    _fetched.clear()
    _fetched.update({email.id: email for email in emails})
    return {
        "ok": True,
        "provider": session.provider_name,
        "emails": [email.to_dict() for email in emails],
    }


@router.post("/emails/{email_id}/analyze")
async def analyze_email(
    email_id: str,
    settings: Settings = Depends(get_settings),
    client: Any = Depends(get_ai_client),
) -> dict:
    email = _fetched.get(email_id)
    if email is None:
        raise HTTPException(status_code=404, detail=f"Unknown email id: {email_id}. Fetch emails first.")

    sequence = result_store.begin()
    try:
        processed = await run_in_threadpool(
            process_connected_email,
            email,
            settings=settings,
            client=client,
        )
    except EmptyInputError as exc:
        raise HTTPException(status_code=400, detail={"code": "empty_input", "message": str(exc)}) from exc

    _fetched[email_id] = processed.email
    body = processed.to_dict()
    result_store.publish(sequence, "analyze_email", body)
    return {"ok": True, **body}
