import json
import logging
import sys
import time
from typing import Union

# attributes every LogRecord carries; anything else came in through ``extra=``
STANDARD_ATTRS = frozenset(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {
    "message",
    "asctime",
}


class JsonFormatter(logging.Formatter):
    """JSON line formatter for structured logging"""

    def format(self, record: logging.LogRecord) -> str:
        """Format log record as JSON line"""
        base = {
            "ts": time.strftime("%Y-%m-%dT%H:%M:%SZ", time.gmtime(record.created)),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        for field, value in vars(record).items():
            if field not in STANDARD_ATTRS and not field.startswith("_"):
                base[field] = value

        if record.exc_info:
            base["exception"] = self.formatException(record.exc_info)

        return json.dumps(base, ensure_ascii=False, default=str)


def setup_json_logging(level: Union[int, str] = logging.INFO) -> None:
    """Setup JSON line logging for the application"""
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)

    logging.info("JSON logging initialized", extra={"trace_id": "system_init"})
