"""Logging filter that redacts key material before it reaches any log sink.

The filter operates on the LogRecord's message string, on its positional args and on
``extra`` keyword fields injected via ``logger.info(..., extra={...})``.  Values of
extra fields whose name looks sensitive are replaced with ``[REDACTED]``.

Key prefixes (``br_live_``) are not secret and survive redaction, so log lines stay
useful for telling keys apart.
"""

import logging
import re

REDACTED = "[REDACTED]"

# Keys whose values are always redacted (case-insensitive substring match on field name)
_SENSITIVE_FIELD_NAMES: tuple[str, ...] = (
    "secret",
    "password",
    "token",
    "authorization",
    "credential",
    "raw_key",
    "api_key",
    "apikey",
)

# Regex patterns that match sensitive data embedded in log message strings
_SENSITIVE_PATTERNS: list[re.Pattern] = [
    # HTTP Authorization header value
    re.compile(r"(Authorization:\s*)((?:Bearer\s+)?\S+)", re.IGNORECASE),
    # Key-value pairs like secret=abc123 or "token": "abc123"
    re.compile(
        r'("?(?:api_key|apikey|password|secret|token|authorization)"?\s*[=:]\s*["\']?)([^"\'&\s,}{]+)',
        re.IGNORECASE,
    ),
    # Issued keys: keep the br_<env>_ prefix, drop the secret part
    re.compile(r"\b(br_[\w\-]*?_)([A-Za-z0-9]{10,})\b"),
]


def _redact_string(value: str) -> str:
    """Apply all pattern-based redactions to a string."""
    for pattern in _SENSITIVE_PATTERNS:
        value = pattern.sub(lambda m: m.group(1) + REDACTED, value)
    return value


def _is_sensitive_key(key: str) -> bool:
    key_lower = key.lower()
    return any(name in key_lower for name in _SENSITIVE_FIELD_NAMES)


class SensitiveDataFilter(logging.Filter):
    """Logging filter that scrubs secrets from log records before emission.

    Attach to the root logger or specific handlers::

        logging.getLogger().addFilter(SensitiveDataFilter())
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = _redact_string(record.msg)

        if record.args:
            if isinstance(record.args, dict):
                record.args = {
                    k: REDACTED if _is_sensitive_key(k) else (
                        _redact_string(v) if isinstance(v, str) else v
                    )
                    for k, v in record.args.items()
                }
            elif isinstance(record.args, tuple):
                record.args = tuple(
                    _redact_string(a) if isinstance(a, str) else a for a in record.args
                )

        for attr in list(vars(record).keys()):
            if attr.startswith("_") or attr in _STANDARD_ATTRS:
                continue
            if _is_sensitive_key(attr):
                setattr(record, attr, REDACTED)
            elif isinstance(getattr(record, attr), str):
                setattr(record, attr, _redact_string(getattr(record, attr)))

        return True  # Never suppress, only mutate


_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({})).keys()) | {"message", "asctime"}
