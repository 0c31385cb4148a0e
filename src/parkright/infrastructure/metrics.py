# 📈 parkright/infrastructure/metrics.py
"""
📈 Prometheus-метрики шару отримання даних.

🔹 `PROXY_ATTEMPTS` — спроби через посередників за результатом (ok/timeout/http_status/...).
🔹 `FETCH_LATENCY` — час повного `fetch_json` (усі спроби разом).
🔹 `DATASET_LOADS` / `DATASET_CACHE_HITS` — завантаження повного датасету та звернення без мережі.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from prometheus_client import Counter, Histogram

PROXY_ATTEMPTS = Counter(
    "parkright_proxy_attempts_total",
    "HTTP attempts through proxy intermediaries",
    ["intermediary", "outcome"],
)

FETCH_LATENCY = Histogram(
    "parkright_fetch_seconds",
    "Time to fetch one JSON document through the intermediary chain",
)

DATASET_LOADS = Counter(
    "parkright_dataset_loads_total",
    "Bulk lot dataset loads by outcome",
    ["outcome"],
)

DATASET_CACHE_HITS = Counter(
    "parkright_dataset_cache_hits_total",
    "ensure_loaded() calls served without a network load",
)


__all__ = [
    "DATASET_CACHE_HITS",
    "DATASET_LOADS",
    "FETCH_LATENCY",
    "PROXY_ATTEMPTS",
]
