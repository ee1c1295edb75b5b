import logging

import pytest

from polytope4d.config import LOG_NAMESPACES


@pytest.fixture
def clean_loggers():
    """Remove handlers installed by setup_logging once the test is done."""
    yield
    for namespace in LOG_NAMESPACES:
        logger = logging.getLogger(namespace)
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()
        logger.setLevel(logging.NOTSET)
