import pytest

from tests.helpers import UpstreamStub


@pytest.fixture
def upstream() -> UpstreamStub:
    return UpstreamStub()
