import os
import logging

DEFAULT_LOG_DIR = "Logs"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def get_logger(name, filename=None, log_dir=DEFAULT_LOG_DIR, level=logging.INFO):
    """
    Return the named logger with a file handler in ``log_dir`` and a stream
    handler at ``level``. Later calls for the same name keep the first log
    file and only apply the new stream ``level``.
    """
    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    if logger.handlers:
        for handler in logger.handlers:
            if not isinstance(handler, logging.FileHandler):
                handler.setLevel(level)
        return logger
    if not os.path.exists(log_dir):
        os.makedirs(log_dir)
    fh = logging.FileHandler(os.path.join(log_dir, f"{filename if filename else name}.log"))
    fh.setLevel(logging.DEBUG)
    formatter = logging.Formatter(LOG_FORMAT)
    fh.setFormatter(formatter)
    logger.addHandler(fh)
    ch = logging.StreamHandler()
    ch.setLevel(level)
    ch.setFormatter(formatter)
    logger.addHandler(ch)
    return logger


from .tokenizer import tokenize_line, iter_tokens, count_words  # noqa: E402
from .selector import select_top_k, top_k_words  # noqa: E402

__all__ = [
    "get_logger",
    "tokenize_line",
    "iter_tokens",
    "count_words",
    "select_top_k",
    "top_k_words",
]
