import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger():
    """main() installs handlers bound to the captured streams of one test."""
    yield
    log = logging.getLogger("halfblock_art")
    for handler in log.handlers:
        handler.close()
    log.handlers[:] = []
    log.setLevel(logging.NOTSET)
    log.propagate = True
