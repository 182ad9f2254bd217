import json
from typing import Any

import pytest
import requests

from legal_clinic.adapters.storage import InMemoryStorage
from legal_clinic.settings.models import ApiSettings, Settings
from tests.fakes import FakeClock

BASE_URL = "http://api.test/api"


@pytest.fixture
def settings():
    return Settings(api=ApiSettings(base_url=BASE_URL))


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def make_response():
    """Factory for real ``requests.Response`` objects with a JSON body."""

    def _make(status_code: int = 200, body: Any = None) -> requests.Response:
        resp = requests.Response()
        resp.status_code = status_code
        resp._content = b"" if body is None else json.dumps(body).encode()
        return resp

    return _make
