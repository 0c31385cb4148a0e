# tests/errors/test_reason_mapper.py
import asyncio

import httpx
import pytest

from parkright.errors.custom_errors import (
    DatasetLoadError,
    DuplicateLotError,
    IntermediaryFailure,
    LiveFetchError,
    LotNotFoundError,
    TransportExhaustedError,
)
from parkright.errors.reason_mapper import ReasonCode, build_error_message, map_error_to_reason


def _exhausted():
    return TransportExhaustedError("https://x.test", [IntermediaryFailure("P1", "HTTP 500", 500)])


def test_transport_exhausted_aggregates_failures():
    err = TransportExhaustedError(
        "https://x.test", [IntermediaryFailure("P1", "HTTP 500", 500), IntermediaryFailure("P2", "timeout after 12s")]
    )

    assert err.reasons == ("HTTP 500", "timeout after 12s")
    assert err.details == "P1: HTTP 500 | P2: timeout after 12s"
    assert err.to_log_extra()["failures"] == ["P1: HTTP 500", "P2: timeout after 12s"]
    assert str(err).startswith("資料來源無法連線")


def test_dataset_error_caused_by_transport_maps_to_source_unreachable():
    try:
        try:
            raise _exhausted()
        except TransportExhaustedError as exc:
            raise DatasetLoadError("transport failed") from exc
    except DatasetLoadError as err:
        assert map_error_to_reason(err)[0] is ReasonCode.SOURCE_UNREACHABLE

    assert map_error_to_reason(DatasetLoadError("bad shape"))[0] is ReasonCode.DATASET_UNAVAILABLE


@pytest.mark.parametrize(
    "exc, reason",
    [
        (LotNotFoundError("foo"), ReasonCode.NOT_FOUND),
        (DuplicateLotError("030"), ReasonCode.DUPLICATE),
        (LiveFetchError("down", lot_id="030"), ReasonCode.LIVE_UNAVAILABLE),
        (_exhausted(), ReasonCode.SOURCE_UNREACHABLE),
        (httpx.ReadTimeout("slow"), ReasonCode.HTTP_TIMEOUT),
        (httpx.ConnectError("refused"), ReasonCode.HTTP_CONNECTION),
        (asyncio.TimeoutError(), ReasonCode.HTTP_TIMEOUT),
        (RuntimeError("boom"), ReasonCode.INTERNAL),
    ],
)
def test_map_error_to_reason(exc, reason):
    assert map_error_to_reason(exc)[0] is reason


def test_http_status_error_carries_code():
    request = httpx.Request("GET", "https://x.test")
    exc = httpx.HTTPStatusError("bad", request=request, response=httpx.Response(502, request=request))

    assert build_error_message(exc) == "資料來源回應錯誤 (HTTP 502)，請稍後再試。"


def test_not_found_message_contains_query():
    assert '"信義"' in build_error_message(LotNotFoundError("信義"))
