import logging

import pytest

from tests.helpers import CallHistory

logging.basicConfig(level=logging.DEBUG)


@pytest.fixture(scope="function")
def history() -> CallHistory:
    return CallHistory()
