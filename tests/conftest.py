"""Pytest configuration and shared fixtures for Thai ID OCR tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from thaiid_ocr.core.types import CardRecord


@pytest.fixture(scope="function")
def sample_ocr_text():
    """Full text as Vision returns it for the front of a Thai ID card."""
    return "\n".join([
        "บัตรประจำตัวประชาชน Thai National ID Card",
        "เลขประจำตัวประชาชน Identification Number 1 1037 02071 81 1",
        "ชื่อตัวและชื่อสกุล : นาย สมชาย ใจดี",
        "Name : Mr. Somchai Jaidee",
        "เกิดวันที่ 5 ม.ค. 2533",
        "Date of Birth 5 January 1990",
        "ศาสนา พุทธ",
        "ที่อยู่ 99/1 หมู่ที่ 4 ต.บางพูด",
        "อ.ปากเกร็ด จ.นนทบุรี",
        "20 มี.ค. 2563",
        "วันออกบัตร Date of issue 20 March 2020",
        "วันบัตรหมดอายุ Date of Expiry 4 January 2029",
    ])


@pytest.fixture(scope="function")
def sample_card_record():
    """Record expected from sample_ocr_text."""
    return CardRecord(
        id_card_number="1103702071811",
        name="Somchai",
        last_name="Jaidee",
        date_of_birth="5 January 1990",
        address="ที่อยู่ 99/1 หมู่ที่ 4 ต.บางพูด อ.ปากเกร็ด จ.นนทบุรี",
        date_of_issue="20 March 2020",
        date_of_expiry="4 January 2029",
    )


@pytest.fixture(scope="function")
def sample_vision_payload(sample_ocr_text):
    """images:annotate response carrying sample_ocr_text."""
    return {
        "responses": [
            {
                "textAnnotations": [
                    {"locale": "th", "description": sample_ocr_text},
                    {"description": "บัตรประจำตัวประชาชน"},
                ]
            }
        ]
    }


def make_response(status, payload=None, json_error=None):
    """Build an aiohttp-like response usable as an async context manager."""
    response = MagicMock()
    response.status = status
    if json_error is not None:
        response.json = AsyncMock(side_effect=json_error)
    else:
        response.json = AsyncMock(return_value=payload)

    ctx = MagicMock()
    ctx.__aenter__ = AsyncMock(return_value=response)
    ctx.__aexit__ = AsyncMock(return_value=None)
    return ctx


@pytest.fixture(scope="function")
def response_factory():
    return make_response


@pytest.fixture(scope="function")
def mock_session():
    """aiohttp.ClientSession stand-in with a scripted post()."""
    session = MagicMock()
    session.closed = False
    session.close = AsyncMock()
    return session


class FakeVisionClient:
    """VisionClient stand-in for the HTTP API tests."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.closed = True

    async def detect_text(self, image_uri):
        self.calls.append(image_uri)
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture(scope="function")
def fake_vision_client():
    return FakeVisionClient


INTEGRATION_MODULES = ("test_api.py", "test_cli.py")


# Configure pytest options
def pytest_configure(config):
    """Configure pytest with custom options."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests"
    )
    config.addinivalue_line(
        "markers", "unit: marks tests as unit tests"
    )


def pytest_collection_modifyitems(config, items):
    """Modify test collection to add markers automatically."""
    for item in items:
        # HTTP API and CLI tests run the whole request path
        if "integration" in item.name.lower() or item.fspath.basename in INTEGRATION_MODULES:
            item.add_marker(pytest.mark.integration)

        if not item.get_closest_marker('integration'):
            item.add_marker(pytest.mark.unit)
