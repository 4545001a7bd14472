"""
artlabel — CLI для добавления артикулов на этикетки отправлений.

Использование:
  artlabel <команда> [опции]

Команды:
  annotate   Добавляет артикулы из списка заказов на страницы этикеток.
  orders     Показывает / экспортирует номера отправлений из списка заказов.
  locate     Проверяет сопоставление страниц этикеток без записи файла.
"""

from __future__ import annotations

import argparse
import logging
import sys

# Windows: консоль может использовать cp1251/cp866; принудительно UTF-8,
# чтобы кириллица в справке и сообщениях выводилась корректно.
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from rich.console import Console
from rich.logging import RichHandler

from artlabel.commands import annotate as cmd_annotate
from artlabel.commands import orders as cmd_orders
from artlabel.commands import locate as cmd_locate

__version__ = "0.1.0"


def setup_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="artlabel",
        description="Добавление артикулов на этикетки отправлений.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version=f"artlabel {__version__}"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Подробный журнал (уровень DEBUG).",
    )

    subparsers = parser.add_subparsers(
        title="команды",
        metavar="<команда>",
        dest="command",
    )
    subparsers.required = True

    cmd_annotate.add_parser(subparsers)
    cmd_orders.add_parser(subparsers)
    cmd_locate.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.verbose)
    args.func(args)


if __name__ == "__main__":
    main()
