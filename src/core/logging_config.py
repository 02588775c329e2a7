import logging
import sys
from pythonjsonlogger.json import JsonFormatter

PLAIN_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
JSON_FORMAT = '%(levelname)s %(name)s %(message)s'


class QuizJsonFormatter(JsonFormatter):
    """JSON log lines with a UTC ISO timestamp, an upper-case level and the call site."""

    def __init__(self, *args, **kwargs):
        kwargs.setdefault('timestamp', True)
        kwargs.setdefault('rename_fields', {'levelname': 'level'})
        super().__init__(*args, **kwargs)

    def add_fields(self, log_data, record, message_dict):
        super().add_fields(log_data, record, message_dict)
        log_data['level'] = record.levelname.upper()
        log_data['module'] = record.module
        log_data['lineno'] = record.lineno


def _is_ours(handler: logging.Handler) -> bool:
    return getattr(handler, "_voter_quiz_handler", False)


def setup_logging(log_level_str: str = "INFO", json_logs: bool = True) -> None:
    """
    Configures root logging for the application: structured JSON on stdout,
    or plain text when json_logs is False. Safe to call more than once.
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(log_level)

    for handler in [h for h in root_logger.handlers if _is_ours(h)]:
        root_logger.removeHandler(handler)

    log_handler = logging.StreamHandler(sys.stdout)
    if json_logs:
        log_handler.setFormatter(QuizJsonFormatter(JSON_FORMAT))
    else:
        log_handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    log_handler._voter_quiz_handler = True
    root_logger.addHandler(log_handler)
    root_logger.info(f"Logging configured with level: {logging.getLevelName(log_level)}")
