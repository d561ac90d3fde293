"""Runtime settings, read from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

DEV_SECRET_KEY = "dev-only-marketplace-secret-change-me"


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    data_dir: Path = _DEFAULT_DATA_DIR
    secret_key: str = DEV_SECRET_KEY
    token_ttl_seconds: int = 86400
    bcrypt_rounds: int = 12
    verify_catalog: bool = False
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            data_dir=Path(os.getenv("MARKETPLACE_DATA_DIR", str(_DEFAULT_DATA_DIR))),
            secret_key=os.getenv("MARKETPLACE_SECRET_KEY", DEV_SECRET_KEY),
            token_ttl_seconds=_env_int("MARKETPLACE_TOKEN_TTL", 86400),
            bcrypt_rounds=_env_int("MARKETPLACE_BCRYPT_ROUNDS", 12),
            verify_catalog=_env_bool("MARKETPLACE_VERIFY_CATALOG", False),
            log_level=os.getenv("LOG_LEVEL", "WARNING").upper(),
        )

    @property
    def uses_dev_secret(self) -> bool:
        return self.secret_key == DEV_SECRET_KEY
