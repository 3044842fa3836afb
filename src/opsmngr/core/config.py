"""Client configuration.

- Centralizes environment variables (pydantic-settings) so the transport and
  the CLI read the same values.
- Supports a per-user `.env` file so credentials do not have to live in the
  working directory.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from opsmngr import __version__

CLOUD_URL = "https://cloud.mongodb.com/"
DEFAULT_USER_AGENT = f"opsmngr-python/{__version__} ({sys.platform})"


def get_user_config_dir() -> Path:
    """Directory holding the per-user `.env`.

    `%APPDATA%\\opsmngr` on Windows, `~/Library/Application Support/opsmngr`
    on macOS and `$XDG_CONFIG_HOME/opsmngr` (default `~/.config/opsmngr`)
    elsewhere.
    """

    if sys.platform.startswith("win"):
        base = Path(os.environ.get("APPDATA") or Path.home())
    elif sys.platform == "darwin":
        base = Path.home() / "Library" / "Application Support"
    else:
        base = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
    return base / "opsmngr"


def get_user_env_file() -> Path:
    return get_user_config_dir() / ".env"


def _parse_env_lines(text: str) -> dict[str, str]:
    """`KEY=value` pairs of a dotenv file; comments, blanks and lines without a key are skipped."""

    data: dict[str, str] = {}
    for line in (raw.strip() for raw in text.splitlines()):
        if not line or line.startswith("#"):
            continue
        key, sep, value = line.partition("=")
        key = key.strip()
        if sep and key:
            data[key] = value.strip().strip("\"'")
    return data


def write_user_env_vars(values: dict[str, str | None], *, env_path: Path | None = None) -> Path:
    """Write or update variables in the user `.env` file.

    Existing keys not present in `values` are kept; `None` values are skipped.
    """

    env_path = env_path or get_user_env_file()
    env_path.parent.mkdir(parents=True, exist_ok=True)

    existing: dict[str, str] = {}
    if env_path.exists():
        existing = _parse_env_lines(env_path.read_text(encoding="utf-8"))

    existing.update({k: v for k, v in values.items() if v is not None})

    lines = ["# opsmngr user config (.env)"]
    for key in sorted(existing.keys()):
        lines.append(f"{key}={existing[key]}")
    env_path.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return env_path


class ClientSettings(BaseSettings):
    """Settings consumed by `build_async_client` and the `Client` facade."""

    model_config = SettingsConfigDict(
        env_prefix="OPSMNGR_",
        extra="ignore",
        case_sensitive=False,
        # Project .env first, then the per-user file.
        env_file=(".env", str(get_user_env_file())),
        env_file_encoding="utf-8",
    )

    base_url: str = Field(
        default=CLOUD_URL,
        min_length=8,
        description="Ops Manager (or Cloud Manager) root URL, without the API prefix.",
    )
    user_agent: str = Field(
        default=DEFAULT_USER_AGENT,
        min_length=1,
        description="User-Agent sent with every request.",
    )
    http_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        description="Timeout per request (seconds).",
    )

    public_key: str | None = Field(
        default=None,
        description="Programmatic API key, public part (digest username).",
    )
    private_key: str | None = Field(
        default=None,
        description="Programmatic API key, private part (digest password).",
    )

    skip_verify: bool = Field(
        default=False,
        description="Disable TLS certificate verification.",
    )
    ca_cert_path: Path | None = Field(
        default=None,
        description="PEM bundle used to validate the certificate presented by Ops Manager.",
    )

    @property
    def has_credentials(self) -> bool:
        return bool(self.public_key) and bool(self.private_key)
