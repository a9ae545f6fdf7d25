"""logfmt output for the SDK's request and validator-store records."""

import logging
import sys
from typing import Any, Optional, TextIO

PACKAGE_LOGGER = "basecamp_sdk"

# Order of keys after level/logger/event.
LOG_EXTRA_FIELDS = (
    "method",
    "path",
    "status",
    "duration_ms",
    "conditional",
    "fingerprint",
    "error",
)

FINGERPRINT_CHARS = 12


class LogfmtFormatter(logging.Formatter):
    """
    One logfmt line per record.
    - Known extras only, in LOG_EXTRA_FIELDS order; missing ones are skipped.
    - Fingerprints are shortened; booleans print as true/false.
    """

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        if msg:
            kv.append(f"event={self._fmt_val(msg)}")

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is None:
                continue
            if key == "fingerprint":
                val = str(val)[:FINGERPRINT_CHARS]
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info and record.exc_info[0] is not None:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        return " ".join(kv)

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, bool):
            return "true" if val else "false"
        if isinstance(val, (int, float)):
            return str(val)
        s = str(val)
        if not s or any(c in s for c in ' ="'):
            s = '"' + s.replace("\\", "\\\\").replace('"', '\\"') + '"'
        return s


def setup_logging(
    level: str = "INFO",
    *,
    logger_name: str = PACKAGE_LOGGER,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Send SDK records to a logfmt stream handler.
    Scoped to the package logger by default so the host application's root
    configuration is left alone; pass logger_name="" for the root logger.
    """
    target = logging.getLogger(logger_name or None)
    # Replace only handlers installed by an earlier call
    for h in list(target.handlers):
        if isinstance(h.formatter, LogfmtFormatter):
            target.removeHandler(h)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(LogfmtFormatter())
    target.addHandler(handler)
    target.setLevel(getattr(logging, level.upper(), logging.INFO))
    return target


__all__ = [
    "setup_logging",
    "LogfmtFormatter",
    "LOG_EXTRA_FIELDS",
    "PACKAGE_LOGGER",
]
