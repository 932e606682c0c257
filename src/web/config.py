"""Runtime settings from environment variables (and .env, when present)."""

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from contactbook.infrastructure import get_default_seed_path

_REPO_ROOT = Path(__file__).resolve().parent.parent.parent


def load_env() -> None:
    """Load .env from repo root or current dir (first one found)."""
    for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
        if path.exists():
            load_dotenv(path)
            break


@dataclass(frozen=True)
class Settings:
    seed_path: Path
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"


def load_settings() -> Settings:
    load_env()
    seed = os.environ.get("CONTACTBOOK_SEED_PATH", "").strip()
    port = os.environ.get("CONTACTBOOK_PORT", "").strip() or "8000"
    try:
        port_number = int(port)
    except ValueError as e:
        raise ValueError(f"CONTACTBOOK_PORT must be an integer, got {port!r}") from e
    return Settings(
        seed_path=Path(seed).resolve() if seed else get_default_seed_path(),
        host=os.environ.get("CONTACTBOOK_HOST", "127.0.0.1").strip() or "127.0.0.1",
        port=port_number,
        log_level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
    )
