import logging

import pytest


@pytest.fixture(autouse=True)
def reset_top_words_logger():
    yield
    logger = logging.getLogger("TOP_WORDS")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
