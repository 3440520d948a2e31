import pytest
import requests

from fakes import DummySession


@pytest.fixture
def session():
    return DummySession()


@pytest.fixture
def connection_refused():
    return requests.ConnectionError("connection refused")
