import logging

import pytest


@pytest.fixture
def root_logger():
    # `configure` replaces the root handlers and level. Put them back for the following tests.
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers = handlers
    root.setLevel(level)
