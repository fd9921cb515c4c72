import logging
import sys

_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_HANDLER_NAME = "user_registry"

# HTTP client loggers used by the supabase client; INFO lines on every request
NOISY_LOGGERS = ["httpx", "httpcore", "hpack"]


def configure_logging(log_level: str = "INFO") -> None:
    """Install a single stdout handler on the root logger.

    Safe to call on every Streamlit rerun: the handler is only added once.
    """
    normalized_level = (log_level or "INFO").strip().upper()
    level = getattr(logging, normalized_level, logging.INFO)

    root_logger = logging.getLogger()
    if not any(h.get_name() == _HANDLER_NAME for h in root_logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        root_logger.addHandler(handler)
    root_logger.setLevel(level)

    for logger_name in NOISY_LOGGERS:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
