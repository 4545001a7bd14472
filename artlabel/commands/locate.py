"""Команда: artlabel locate — сопоставление страниц этикеток без записи файла."""

from __future__ import annotations

import argparse

from rich.console import Console

from artlabel.commands.annotate import _load_settings, _read_input, _show_pages
from pipeline import LabelsError, inspect_labels

console = Console()


def run(args: argparse.Namespace) -> None:
    settings = _load_settings(args)
    orders = _read_input(args.orders_file, settings.max_input_bytes)
    labels = _read_input(args.labels_file, settings.max_input_bytes)

    try:
        table, pages = inspect_labels(orders, labels)
    except LabelsError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    _show_pages(pages)
    matched = sum(1 for p in pages if p.matched)
    console.print(
        f"  [dim]{matched} из {len(pages)} страниц совпадают; "
        f"номеров в списке заказов: {len(table)}[/dim]\n"
    )
    if not matched:
        console.print("[red]Не удалось найти совпадения номеров отправлений между файлами.[/red]")
        raise SystemExit(1)


def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "locate",
        help="Проверяет сопоставление страниц этикеток без записи файла.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Показывает для каждой страницы этикеток найденный номер отправления
и артикул из списка заказов. Документ не изменяется.

Примеры:
  artlabel locate orders.pdf labels.pdf
  artlabel -v locate orders.pdf labels.pdf
        """,
    )
    p.add_argument("orders_file", metavar="ЗАКАЗЫ.pdf", help="PDF со списком заказов.")
    p.add_argument("labels_file", metavar="ЭТИКЕТКИ.pdf", help="PDF с этикетками.")
    p.set_defaults(func=run)
