"""
config.py — Runtime Configuration
==================================
All knobs come from environment variables so the same code runs under
the dev server, gunicorn, or the test suite without edits.

    VISUALIZER_SECRET_KEY       – Flask session key (random per process if unset)
    VISUALIZER_LOG_LEVEL        – DEBUG / INFO / WARNING / ERROR
    VISUALIZER_MAX_ARRAY        – largest input array the API accepts
    VISUALIZER_MAX_KEPT_FRAMES  – frames the run store keeps across all sessions
    VISUALIZER_DEFAULT_SPEED    – playback preset for new sessions
    VISUALIZER_PORT             – dev-server port

Every frame holds a full copy of the array and the quadratic sorts emit
about n² frames, so MAX_ARRAY bounds the size of one run and
MAX_KEPT_FRAMES bounds the memory of the whole run store.
"""

import os
import secrets
from dataclasses import dataclass
from typing import Mapping, Optional


_PREFIX = "VISUALIZER_"


@dataclass(frozen=True)
class AppConfig:
    secret_key:       str
    log_level:        str = "INFO"
    max_array:        int = 128
    max_kept_frames:  int = 50_000
    default_speed:    str = "medium"
    port:             int = 5000


def load_config(environ: Optional[Mapping[str, str]] = None) -> AppConfig:
    """Build an AppConfig from `environ` (defaults to os.environ)."""
    env = os.environ if environ is None else environ

    def get(name: str, default: str) -> str:
        return env.get(_PREFIX + name, default)

    return AppConfig(
        secret_key=get("SECRET_KEY", "") or secrets.token_hex(32),
        log_level=get("LOG_LEVEL", "INFO").upper(),
        max_array=_positive_int(get("MAX_ARRAY", "128"), "MAX_ARRAY"),
        max_kept_frames=_positive_int(get("MAX_KEPT_FRAMES", "50000"), "MAX_KEPT_FRAMES"),
        default_speed=get("DEFAULT_SPEED", "medium"),
        port=_as_int(get("PORT", "5000"), "PORT"),
    )


def _as_int(raw: str, name: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{_PREFIX}{name} must be an integer, got {raw!r}") from None


def _positive_int(raw: str, name: str) -> int:
    value = _as_int(raw, name)
    if value < 1:
        raise ValueError(f"{_PREFIX}{name} must be positive, got {value}")
    return value
