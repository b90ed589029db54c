import json
import logging

from locator.core.config import LOG_LEVEL


class JSONLineFormatter(logging.Formatter):
    """One JSON object per record; the message is escaped like any other value."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "time": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_data, ensure_ascii=False, default=str)


logger = logging.getLogger("locator")
logger.setLevel(LOG_LEVEL)

handler = logging.StreamHandler()
handler.setFormatter(JSONLineFormatter())
if not logger.handlers:
    logger.addHandler(handler)


def get_logger(name: str) -> logging.Logger:
    # module loggers live under "locator" and share the handler above
    return logging.getLogger(name)
