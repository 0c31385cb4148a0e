# tests/infrastructure/resolver/test_lot_resolver.py
import pytest

from conftest import STATIC_URL
from parkright.domain.parking.entities import LotRecord
from parkright.errors.custom_errors import DatasetLoadError, LotNotFoundError
from parkright.infrastructure.dataset.dataset_cache import DatasetCache
from parkright.infrastructure.resolver.lot_resolver import LotResolver, normalize_query
from parkright.infrastructure.resolver.quick_access import DEFAULT_QUICK_ACCESS, quick_access_from_config


def _resolver(transport, quick_access=DEFAULT_QUICK_ACCESS, **kwargs) -> LotResolver:
    return LotResolver(DatasetCache(transport, STATIC_URL), quick_access, **kwargs)


# ──────────────────────────────────────────────────────────────────────────────
#                          📌 Закріплений список
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_quick_access_hit_needs_no_network(fake_transport):
    resolver = _resolver(fake_transport)

    record = await resolver.search("小巨蛋")

    assert record.id == "254"
    assert fake_transport.calls == []


@pytest.mark.asyncio
async def test_quick_access_matches_address_case_insensitively(fake_transport):
    quick = (LotRecord(id="900", name="Xinyi Plaza Parking", address="Shifu Rd"),)
    resolver = _resolver(fake_transport, quick)

    assert (await resolver.search("  XINYI ")).id == "900"
    assert (await resolver.search("shifu")).id == "900"
    assert fake_transport.calls == []


# ──────────────────────────────────────────────────────────────────────────────
#                          🗃️ Повний датасет
# ──────────────────────────────────────────────────────────────────────────────

@pytest.mark.asyncio
async def test_dataset_first_match_in_source_order(fake_transport):
    resolver = _resolver(fake_transport)

    record = await resolver.search("松壽")

    assert record.id == "001"                                     # 001 і 002 обидва на 松壽路
    assert fake_transport.calls_to(STATIC_URL) == 1


@pytest.mark.asyncio
async def test_dataset_match_is_case_insensitive(fake_transport):
    resolver = _resolver(fake_transport)
    assert (await resolver.search("taipei arena")).id == "003"


@pytest.mark.asyncio
async def test_empty_quick_access_goes_straight_to_dataset(fake_transport):
    resolver = _resolver(fake_transport, ())

    record = await resolver.search("民生")

    assert record.id == "030"
    assert record.capacity == 305
    assert fake_transport.calls_to(STATIC_URL) == 1


@pytest.mark.asyncio
async def test_repeated_search_is_stable_and_loads_once(fake_transport):
    resolver = _resolver(fake_transport, ())

    first = await resolver.search("府前")
    second = await resolver.search("府前")

    assert first == second
    assert fake_transport.calls_to(STATIC_URL) == 1


@pytest.mark.asyncio
async def test_unknown_query_raises_not_found(fake_transport):
    resolver = _resolver(fake_transport)

    with pytest.raises(LotNotFoundError) as err:
        await resolver.search("不存在的地方")

    assert err.value.query == "不存在的地方"
    assert "不存在的地方" in err.value.message


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["", "   ", None])
async def test_blank_query_is_not_found_without_network(fake_transport, query):
    resolver = _resolver(fake_transport)

    with pytest.raises(LotNotFoundError):
        await resolver.search(query)

    assert fake_transport.calls == []


@pytest.mark.asyncio
async def test_dataset_failure_propagates(make_transport, exhausted_error):
    resolver = _resolver(make_transport(error=exhausted_error))

    with pytest.raises(DatasetLoadError):
        await resolver.search("松壽")


@pytest.mark.asyncio
async def test_progress_callback_is_forwarded_to_dataset_load(fake_transport):
    messages = []
    resolver = _resolver(fake_transport, (), on_progress=messages.append)

    await resolver.search("民生")

    assert messages == ["正在下載完整搜尋引擎...", "搜尋引擎已就緒"]


# ──────────────────────────────────────────────────────────────────────────────
#                          ⚙️ Конфіг закріпленого списку
# ──────────────────────────────────────────────────────────────────────────────

def test_normalize_query():
    assert normalize_query("  Taipei ARENA ") == "taipei arena"
    assert normalize_query(None) == ""


def test_quick_access_from_config():
    assert quick_access_from_config(None) == DEFAULT_QUICK_ACCESS
    assert quick_access_from_config([]) == ()

    built = quick_access_from_config(
        [{"id": "030", "name": "民生", "address": "民生東路", "totalcar": "305"}, {"id": "", "name": "no id"}, "bad"]
    )
    assert [r.id for r in built] == ["030"]
    assert built[0].capacity == 305
