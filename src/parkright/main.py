# 🚀 parkright/main.py
"""
🚀 Консольна точка входу: `python -m parkright 民生 小巨蛋 ...`

🔹 Прапорці: `--log-level=DEBUG`, `--no-quick` (без закріплених паркінгів), `--refresh` (ще один bulk-апдейт).
🔹 Піднімає логування з конфігу, контейнер і прогріває датасет, поки резолвляться запити.
🔹 Виводить таблицю відстежуваних паркінгів через rich; помилки — текстом для користувача.
"""

from __future__ import annotations

# 🌐 Зовнішні бібліотеки
from rich.console import Console
from rich.table import Table

# 🔠 Системні імпорти
import asyncio
import logging
import os
import sys
from typing import List, Optional, Sequence

# 🧩 Внутрішні модулі проєкту
from parkright.config.config_service import ConfigService
from parkright.config.setup.container import Container, bootstrap_logging
from parkright.domain.parking.entities import TrackedLot
from parkright.errors.custom_errors import AppError
from parkright.errors.reason_mapper import build_error_message
from parkright.shared.utils.logger import LOG_NAME

logger = logging.getLogger(LOG_NAME)


# ================================
# ⚙️ CLI-ФЛАГИ → ENV
# ================================
def _apply_cli_flags_to_env(args: Sequence[str]) -> List[str]:
    """Мапить прапорці на ENV і повертає позиційні аргументи (запити)."""
    queries: List[str] = []
    for arg in args:
        if arg.startswith("--log-level="):
            os.environ["PARKRIGHT_LOG_LEVEL"] = arg.split("=", 1)[1]
        elif arg.startswith("--config="):
            os.environ["PARKRIGHT_CONFIG"] = arg.split("=", 1)[1]
        elif arg.startswith("--"):
            continue                                                # 🏳️ Булеві прапорці читаються окремо
        else:
            queries.append(arg)
    return queries


def render_table(lots: Sequence[TrackedLot]) -> Table:
    table = Table(title="Taipei ParkRight")
    table.add_column("ID", style="dim")
    table.add_column("停車場")
    table.add_column("地址")
    table.add_column("空位", justify="right")
    table.add_column("費率")
    table.add_column("更新時間")
    for lot in lots:
        available = f"{lot.status.available}/{lot.record.capacity}"
        style = "bold red" if lot.status.is_full else ("yellow" if lot.status.available < 10 else "green")
        table.add_row(
            lot.record.id,
            lot.record.name,
            lot.record.address,
            f"[{style}]{available}[/{style}]",
            lot.record.rate_description,
            lot.last_updated.astimezone().strftime("%H:%M:%S"),
        )
    return table


async def run_async(queries: Sequence[str], *, quick: bool = True, refresh: bool = False, console: Optional[Console] = None) -> int:
    """Повертає код виходу: 0 — усе вдалося, 1 — хоча б один запит з помилкою."""
    console = console or Console()

    def progress(message: str) -> None:
        logger.info("🗃️ %s", message)

    container = Container(ConfigService(), on_progress=progress)
    exit_code = 0
    try:
        container.session.preload(progress)
        with console.status("讀取停車場資料..."):
            if quick:
                await container.tracker.track_quick_access()
            for query in queries:
                try:
                    await container.tracker.track(query)
                except AppError as exc:
                    logger.debug("🔎 '%s' не додано: %s", query, exc, extra=exc.to_log_extra())
                    console.print(f"[red]{query}[/red]: {build_error_message(exc)}")
                    exit_code = 1
            if refresh and len(container.tracker):
                try:
                    await container.tracker.refresh_live()
                except AppError as exc:
                    console.print(f"[red]{build_error_message(exc)}[/red]")
                    exit_code = 1
        if len(container.tracker):
            console.print(render_table(container.tracker.lots))
        else:
            console.print("請輸入停車場名稱開始追蹤")
    finally:
        await container.aclose()
    return exit_code


# ================================
# 🚀 ENTRYPOINT
# ================================
def run() -> None:
    args = list(sys.argv[1:])
    queries = _apply_cli_flags_to_env(args)
    bootstrap_logging()
    exit_code = asyncio.run(run_async(queries, quick="--no-quick" not in args, refresh="--refresh" in args))
    sys.exit(exit_code)


if __name__ == "__main__":
    run()
