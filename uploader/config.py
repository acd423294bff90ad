import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_PORT = 8080
DEFAULT_HOST = "127.0.0.1"
DEFAULT_MEDIA_DIR = "www/media"
AUTH_HEADER = "X-Api-Key"


def load_tokens(raw: str | None) -> frozenset[str]:
    """Parse a comma-separated token list.

    Blank entries are dropped, so an unset or empty value yields an empty
    set and nothing is accepted.
    """
    if not raw:
        return frozenset()
    return frozenset(t.strip() for t in raw.split(",") if t.strip())


def parse_port(raw: str | None) -> int:
    value = (raw or "").strip()
    if not value:
        return DEFAULT_PORT
    port = int(value)
    if not 0 <= port <= 65535:
        raise ValueError(f"port out of range: {port}")
    return port


@dataclass(frozen=True, slots=True)
class Settings:
    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST
    tokens: frozenset[str] = field(default_factory=frozenset)
    media_root: Path = Path(DEFAULT_MEDIA_DIR)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            port=parse_port(env.get("PORT")),
            tokens=load_tokens(env.get("TOKENS")),
        )
