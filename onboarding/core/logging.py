import logging
import sys

SENSITIVE_KEYS = {"password", "password_hash", "token", "session_id", "cookie", "secret"}

# Attributes every LogRecord has; anything else came in through `extra`.
_RECORD_KEYS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class KeyValueFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        extras = {
            key: value for key, value in vars(record).items()
            if key not in _RECORD_KEYS
        }
        if not extras:
            return line
        pairs = " ".join(
            f"{key}={'***' if key.lower() in SENSITIVE_KEYS else value}"
            for key, value in sorted(extras.items())
        )
        return f"{line} | {pairs}"


def configure_logging(level: str = "INFO") -> None:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        KeyValueFormatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )

    root = logging.getLogger("onboarding")
    root.handlers[:] = [handler]
    root.setLevel(level.upper())
    root.propagate = False
