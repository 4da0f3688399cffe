"""Runtime configuration defaults for the host link and outbound callbacks."""

from __future__ import annotations

import os
from pathlib import Path

from burner_phone.constant import DEFAULT_BRAND


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


HOST_WS_URL = os.environ.get("BURNER_HOST_WS_URL", "ws://127.0.0.1:30120/burner")
HOST_RECONNECT_DELAY_SECONDS = 2.0

# NUI-style callbacks are posted to <base>/nui:<event>.
CALLBACK_BASE_URL = os.environ.get("BURNER_CALLBACK_URL", "https://burner_phone")
OUTBOUND_TIMEOUT_SECONDS = 5.0

# Development build: no host link, outbound events are only logged.
DEV_MODE = _env_flag("BURNER_DEV")

LOG_LEVEL = os.environ.get("BURNER_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.environ.get("BURNER_LOG_DIR", "logs"))
LOG_RETENTION_DAYS = 7

TYPEWRITER_INTERVAL_MS = 30

BRAND = os.environ.get("BURNER_BRAND", DEFAULT_BRAND)
