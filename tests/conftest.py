# tests/conftest.py
import asyncio
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest

# Додаємо src в sys.path, щоб працював імпорт "parkright.…" без встановлення пакета
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

STATIC_URL = "https://data.test/TCMSV_alldesc.json"
LIVE_URL = "https://data.test/TCMSV_allavailable.json"


def _static_payload() -> Dict[str, Any]:
    return {
        "data": {
            "UPDATETIME": "2026-10-18T09:00:00",
            "park": [
                {
                    "id": "030",
                    "name": "民生社區中心地下停車場",
                    "address": "民生東路5段163-1號地下",
                    "payex": "一至五(8-22)30元/時",
                    "totalcar": "305",
                },
                {"id": "001", "name": "府前廣場地下停車場", "address": "松壽路1號地下", "payex": "", "totalcar": "1997"},
                {"id": "002", "name": "松壽廣場地下停車場", "address": "松壽路11號地下", "totalcar": "abc"},
                "garbage",
                {"id": "003", "name": "Taipei Arena Parking", "address": "Nanjing E. Rd", "totalcar": "-5"},
            ],
        }
    }


def _live_payload() -> Dict[str, Any]:
    return {
        "data": {
            "UPDATETIME": "2026-10-18T09:00:30",
            "park": [
                {"id": "030", "availablecar": "-3"},
                {"id": "001", "availablecar": "120"},
                {"id": "002", "availablecar": "N/A"},
                {"id": "001", "availablecar": "7"},
                {"id": "254", "availablecar": "41"},
            ],
        }
    }


class FakeTransport:
    """Транспорт-заглушка: документи за URL, опційна помилка та «ворота» для конкурентних тестів."""

    def __init__(self, documents: Optional[Dict[str, Any]] = None, error: Optional[BaseException] = None) -> None:
        self.documents = dict(documents or {})
        self.error = error
        self.calls: List[str] = []
        self.gate: Optional[asyncio.Event] = None
        self.closed = False

    async def fetch_json(self, target_url: str) -> Dict[str, Any]:
        self.calls.append(target_url)
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        return self.documents[target_url]

    def calls_to(self, url: str) -> int:
        return self.calls.count(url)

    async def aclose(self) -> None:
        self.closed = True


@pytest.fixture
def static_payload() -> Dict[str, Any]:
    return _static_payload()


@pytest.fixture
def live_payload() -> Dict[str, Any]:
    return _live_payload()


@pytest.fixture
def fake_transport(static_payload, live_payload) -> FakeTransport:
    return FakeTransport({STATIC_URL: static_payload, LIVE_URL: live_payload})


@pytest.fixture
def make_transport():
    return FakeTransport


@pytest.fixture
def exhausted_error():
    from parkright.errors.custom_errors import IntermediaryFailure, TransportExhaustedError

    return TransportExhaustedError(
        "https://data.test/any.json",
        [IntermediaryFailure("P1", "HTTP 500", 500), IntermediaryFailure("P2", "timeout after 12s")],
    )
