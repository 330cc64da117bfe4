import logging
import logging.config
import os
import json_log_formatter

STORE_LOGGER_NAME = "store_errors"
APP_HANDLER_NAME = "app_file"
STORE_HANDLER_NAME = "store_file"


class CustomJSONFormatter(json_log_formatter.JSONFormatter):
    def json_record(self, message, extra, record):
        extra['message'] = message  # event label
        extra['timestamp'] = self.formatTime(record, self.datefmt)
        extra['level'] = record.levelname
        extra['logger'] = record.name
        if record.exc_info:
            extra['exc_info'] = self.formatException(record.exc_info)
        return extra


def _replace_handler(logger: logging.Logger, name: str, path: str, formatter: logging.Formatter):
    # Each call points the logger at the current log dir
    for handler in [h for h in logger.handlers if h.get_name() == name]:
        logger.removeHandler(handler)
        handler.close()

    handler = logging.FileHandler(path, delay=True)
    handler.set_name(name)
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def setup_logging(log_dir: str = 'logs', level: str = 'INFO'):
    os.makedirs(log_dir, exist_ok=True)

    formatter = CustomJSONFormatter()

    # Main application log handler
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    _replace_handler(root_logger, APP_HANDLER_NAME, os.path.join(log_dir, 'app.log'), formatter)

    # Raw store failures get their own file and never reach a response
    store_logger = logging.getLogger(STORE_LOGGER_NAME)
    store_logger.setLevel(logging.INFO)
    _replace_handler(store_logger, STORE_HANDLER_NAME, os.path.join(log_dir, 'store.log'), formatter)
    store_logger.propagate = False  # Prevent store errors from also going to app.log
