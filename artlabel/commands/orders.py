"""Команда: artlabel orders — номера отправлений из списка заказов."""

from __future__ import annotations

import argparse
import json
from dataclasses import asdict
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box

from artlabel.commands.annotate import _load_settings, _read_input
from data_model.mapping import MappingTable
from pipeline import LabelsError, build_mapping_table

console = Console()


# ---------------------------------------------------------------------------
# Запись в JSON
# ---------------------------------------------------------------------------

def _write_json(table: MappingTable, json_path: Path) -> None:
    data = [asdict(r) for r in table]
    json_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
    console.print(f"[green]JSON:[/green] {json_path}  ({len(table)} записей)")


# ---------------------------------------------------------------------------
# Отображение в терминале
# ---------------------------------------------------------------------------

def _show_table(table: MappingTable) -> None:
    out = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    out.add_column("СТР",         justify="right", no_wrap=True, style="dim")
    out.add_column("ОТПРАВЛЕНИЕ", no_wrap=True, style="bold cyan")
    out.add_column("АРТИКУЛ",     no_wrap=True)
    out.add_column("ТОВАР",       no_wrap=False, max_width=60)

    for record in table:
        out.add_row(
            str(record.page),
            record.shipment_number,
            record.article or "[yellow]—[/yellow]",
            record.product_name[:80],
        )

    console.print()
    console.print(out)
    console.print(f"  [dim]{len(table)} номеров отправлений[/dim]")
    if table.duplicates:
        console.print(f"  [yellow]повторов (используется первое вхождение): {len(table.duplicates)}[/yellow]")
    console.print()


# ---------------------------------------------------------------------------
# Основная логика команды
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = _load_settings(args)
    orders = _read_input(args.orders_file, settings.max_input_bytes)

    try:
        table = build_mapping_table(orders)
    except LabelsError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    console.print(f"Найдено [bold]{len(table)}[/bold] номеров отправлений.")

    if args.json:
        _write_json(table, Path(args.json))

    if args.show or not args.json:
        _show_table(table)


# ---------------------------------------------------------------------------
# Регистрация парсера
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "orders",
        help="Показывает / экспортирует номера отправлений из списка заказов.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Разбирает PDF со списком заказов на записи (номер отправления, артикул,
название товара) и выводит их в терминал или в JSON.

Примеры:
  artlabel orders orders.pdf
  artlabel orders orders.pdf --json orders.json
  artlabel orders orders.pdf --json orders.json --show
        """,
    )
    p.add_argument("orders_file", metavar="ЗАКАЗЫ.pdf", help="PDF со списком заказов.")
    p.add_argument(
        "--json",
        metavar="ПУТЬ",
        default=None,
        help="Сохранить записи в JSON.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Показать таблицу и при записи в JSON.",
    )
    p.set_defaults(func=run)
