# tests/domain/test_parking_entities.py
from datetime import datetime, timezone

import pytest

from parkright.domain.parking.entities import (
    RATE_FALLBACK,
    LiveStatus,
    LotRecord,
    TrackedLot,
    build_map_url,
    non_negative_count,
    parse_count,
)
from parkright.domain.parking.interfaces import has_park_collection


# ──────────────────────────────────────────────────────────────────────────────
#                          🔢 Парсинг лічильників
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "raw, expected",
    [
        ("305", 305),
        (" 12 ", 12),
        ("12 авто", 12),
        ("-3", -3),
        ("+7", 7),
        (42, 42),
        (3.9, 3),
        ("N/A", None),
        ("３０５", None),
        ("12３", 12),
        ("", None),
        (None, None),
        (True, None),
    ],
)
def test_parse_count_behaves_like_leading_integer_parse(raw, expected):
    assert parse_count(raw) == expected


@pytest.mark.parametrize("raw", ["-3", "abc", None, -10])
def test_non_negative_count_clamps_to_zero(raw):
    assert non_negative_count(raw) == 0


# ──────────────────────────────────────────────────────────────────────────────
#                          🅿️ LotRecord
# ──────────────────────────────────────────────────────────────────────────────

def test_lot_record_from_raw_maps_source_fields():
    record = LotRecord.from_raw(
        {"id": " 030 ", "name": "民生社區中心地下停車場", "address": "民生東路5段163-1號地下", "payex": "30元/時", "totalcar": "305"}
    )

    assert record.id == "030"
    assert record.capacity == 305
    assert record.rate_description == "30元/時"
    assert record.map_url == build_map_url("民生社區中心地下停車場")


def test_lot_record_fallbacks_for_missing_rate_and_bad_capacity():
    record = LotRecord.from_raw({"id": "002", "name": "松壽廣場", "address": "松壽路11號", "payex": "  ", "totalcar": "abc"})

    assert record.rate_description == RATE_FALLBACK
    assert record.capacity == 0


def test_lot_record_negative_capacity_is_clamped():
    assert LotRecord(id="1", name="A", address="B", capacity=-5).capacity == 0


def test_lot_record_keeps_explicit_map_url():
    record = LotRecord.from_raw({"id": "9", "name": "X", "address": "Y", "mapUrl": "https://maps.test/x"})
    assert record.map_url == "https://maps.test/x"


def test_map_url_is_percent_encoded_and_deterministic():
    url = build_map_url("嘟嘟房 小巨蛋")
    assert url == build_map_url("嘟嘟房 小巨蛋")
    assert " " not in url
    assert url.startswith("https://www.google.com/maps/search/?api=1&query=")


def test_lot_record_matches_name_or_address_casefolded():
    record = LotRecord(id="003", name="Taipei Arena Parking", address="Nanjing E. Rd")

    assert record.matches("arena")
    assert record.matches("nanjing e.")
    assert not record.matches("xinyi")


# ──────────────────────────────────────────────────────────────────────────────
#                          📡 LiveStatus / TrackedLot
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.parametrize(
    "availablecar, available, is_full",
    [("-3", 0, True), ("N/A", 0, True), ("0", 0, True), ("120", 120, False), (5, 5, False)],
)
def test_live_status_from_raw_clamps_and_derives_is_full(availablecar, available, is_full):
    status = LiveStatus.from_raw({"id": "030", "availablecar": availablecar})

    assert status.lot_id == "030"
    assert status.available == available
    assert status.is_full is is_full


def test_live_status_unavailable_is_full():
    status = LiveStatus.unavailable("999")
    assert status.to_dict() == {"lot_id": "999", "available": 0, "is_full": True}


def test_tracked_lot_with_status_replaces_status_and_timestamp():
    record = LotRecord(id="030", name="民生", address="民生東路")
    first = TrackedLot(record=record, status=LiveStatus("030", 1), last_updated=datetime(2026, 1, 1, tzinfo=timezone.utc))
    later = datetime(2026, 1, 2, tzinfo=timezone.utc)

    updated = first.with_status(LiveStatus("030", 9), later)

    assert updated.lot_id == "030"
    assert updated.status.available == 9
    assert updated.last_updated == later
    assert first.status.available == 1


def test_has_park_collection():
    assert has_park_collection({"data": {"park": []}})
    assert not has_park_collection({"data": {"park": {}}})
    assert not has_park_collection({"park": []})
    assert not has_park_collection([1, 2])
