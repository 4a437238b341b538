# english_coach/core/logging_utils.py
"""
JSON-lines log formatting.

Rin's comments and the raw Gemini completions are Japanese, so records are
written with `ensure_ascii=False` to keep them readable in the log stream.
Long string values (raw completions, rendered prompts) are cut to
`max_value_length` characters.
"""
import datetime as dt
import json
import logging
from typing import Any, Dict, Optional

# Every attribute a bare LogRecord carries (3.12 adds taskName); the rest came in via `extra=`
_STANDARD_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", (), None).__dict__
) | {"message", "asctime", "taskName"}

TRUNCATION_MARKER = "…[truncated]"


class JSONLogFormatter(logging.Formatter):
    def __init__(
        self,
        *,
        fmt_keys: Optional[Dict[str, str]] = None,
        datefmt: Optional[str] = None,
        max_value_length: int = 2000,
    ):
        super().__init__(datefmt=datefmt)
        # output key -> LogRecord attribute, e.g. {"level": "levelname"}
        self.fmt_keys = dict(fmt_keys or {})
        self.max_value_length = max_value_length

    def format(self, record: logging.LogRecord) -> str:
        return json.dumps(self.to_dict(record), default=str, ensure_ascii=False)

    def to_dict(self, record: logging.LogRecord) -> Dict[str, Any]:
        computed: Dict[str, Any] = {
            "message": record.getMessage(),
            "timestamp": self._timestamp(record),
        }
        if record.exc_info:
            computed["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            computed["stack_info"] = self.formatStack(record.stack_info)

        out: Dict[str, Any] = {}
        for key, attr in self.fmt_keys.items():
            value = computed[attr] if attr in computed else getattr(record, attr, None)
            if value is not None:
                out[key] = value

        mapped_attrs = set(self.fmt_keys.values())
        for key, value in computed.items():
            if key not in mapped_attrs:
                out.setdefault(key, value)

        for key, value in record.__dict__.items():
            if key not in _STANDARD_RECORD_ATTRS and key not in mapped_attrs:
                out.setdefault(key, value)

        return {key: value if key in ("exc_info", "stack_info") else self._clip(value) for key, value in out.items()}

    def _timestamp(self, record: logging.LogRecord) -> str:
        if self.datefmt:
            return self.formatTime(record, self.datefmt)
        return dt.datetime.fromtimestamp(record.created, tz=dt.timezone.utc).isoformat()

    def _clip(self, value: Any) -> Any:
        if isinstance(value, str) and len(value) > self.max_value_length:
            return value[: self.max_value_length] + TRUNCATION_MARKER
        return value
