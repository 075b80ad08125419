import os
from pathlib import Path
from dotenv import load_dotenv

# Load .env once, globally
load_dotenv()

# Project root (independent of current working directory).
PROJECT_ROOT = Path(__file__).resolve().parents[3]

def resolve_dir(env_key: str, default: str) -> Path:
    """
    Resolve a directory path from ENV.
    Relative paths are resolved against PROJECT_ROOT.
    The directory is not created here; writers create it on demand.
    """
    value = os.getenv(env_key, default)
    path = Path(value)

    if not path.is_absolute():
        path = PROJECT_ROOT / path

    return path


SECRETS_DIR = resolve_dir("MAIL_INSIGHT_SECRETS_DIR", "secrets")
STATE_DIR   = resolve_dir("MAIL_INSIGHT_STATE_DIR", ".state")

SESSION_PATH = STATE_DIR / "session.json"
