import logging

import pytest


@pytest.fixture(autouse=True)
def reset_line_filter_logger():
    """setup_logger binds handlers to the current sys.stderr; drop them between tests."""
    yield
    logger = logging.getLogger("line_filter")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
