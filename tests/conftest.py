import pytest

from tests.fakes import make_reply


@pytest.fixture
def reply():
    return make_reply()
