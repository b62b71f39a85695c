# budget_advisor/config.py
"""Runtime configuration for the budget advisor.

Values come from the process environment, with a ``.env`` file in the
working directory loaded first (the environment wins over the file).
"""
from __future__ import annotations

import logging
import os

from dotenv import load_dotenv

load_dotenv()

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    """Positive integer from the environment; a malformed value falls back to ``default``."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Ignoring %s=%r: not an integer, using %s", name, raw, default)
        return default
    if value <= 0:
        logger.warning("Ignoring %s=%r: must be positive, using %s", name, raw, default)
        return default
    return value


# Checked in order; the first non-empty value is used.
API_KEY_ENV_VARS = ("GEMINI_API_KEY", "API_KEY")

GEMINI_API_BASE = "https://generativelanguage.googleapis.com/v1beta/models"
DEFAULT_MODEL = os.getenv("BUDGET_ADVISOR_MODEL", "gemini-2.5-flash")

TIMEOUT_CONNECT = _env_int("BUDGET_ADVISOR_TIMEOUT_CONNECT", 10)
TIMEOUT_READ = _env_int("BUDGET_ADVISOR_TIMEOUT_READ", 60)

LOG_LEVEL = os.getenv("BUDGET_ADVISOR_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"

CURRENCY_SYMBOL = "₹"


def get_api_key() -> str:
    """Return the configured Gemini API key, or ``""`` when none is set.

    A missing key is not an error here: the request goes out without one and
    the endpoint's rejection is reported as an authentication failure.
    """
    for name in API_KEY_ENV_VARS:
        value = os.getenv(name)
        if value:
            return value.strip()
    return ""


def configure_logging(level: str | None = None) -> None:
    """Install a root handler once; later calls only adjust the level."""
    root = logging.getLogger()
    resolved = getattr(logging, (level or LOG_LEVEL), logging.INFO)
    if not root.handlers:
        logging.basicConfig(level=resolved, format=LOG_FORMAT)
    else:
        root.setLevel(resolved)
