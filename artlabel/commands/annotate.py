"""Команда: artlabel annotate — артикулы из списка заказов на этикетки."""

from __future__ import annotations

import argparse
import time
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich import box

from artlabel._config import Settings, positive_float
from fonts.source import resolve_font_source
from pdf.label_locator import LabelPage
from pipeline import LabelsError, process

console = Console()


# ---------------------------------------------------------------------------
# Входные файлы
# ---------------------------------------------------------------------------

def _read_input(path_str: str, max_bytes: int) -> bytes:
    path = Path(path_str)
    if not path.exists():
        console.print(f"[red]Файл не существует:[/red] {path}")
        raise SystemExit(1)
    if path.suffix.lower() != ".pdf":
        console.print(f"[red]Ожидался файл .pdf, получен:[/red] {path.suffix or path.name}")
        raise SystemExit(1)
    size = path.stat().st_size
    if size > max_bytes:
        console.print(
            f"[red]Файл слишком большой:[/red] {path} "
            f"({size / 1024 / 1024:.1f} МБ, допустимо до {max_bytes / 1024 / 1024:.0f} МБ)"
        )
        raise SystemExit(1)
    return path.read_bytes()


def _override(value, fallback):
    return fallback if value is None else value


def _load_settings(args: argparse.Namespace) -> Settings:
    try:
        settings = Settings.from_env()
    except ValueError as e:
        console.print(f"[red]Ошибка конфигурации:[/red] {e}")
        raise SystemExit(1)
    return Settings(
        font         = getattr(args, "font", None) or settings.font,
        font_size    = _override(getattr(args, "font_size", None), settings.font_size),
        band_height  = _override(getattr(args, "band_height", None), settings.band_height),
        font_timeout = settings.font_timeout,
        max_input_mb = settings.max_input_mb,
    )


def _default_out_path() -> Path:
    return Path(f"labels_with_articles_{int(time.time() * 1000)}.pdf")


# ---------------------------------------------------------------------------
# Отображение в терминале
# ---------------------------------------------------------------------------

def _show_pages(pages: list[LabelPage]) -> None:
    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("СТР",       justify="right", no_wrap=True, style="dim")
    table.add_column("ОТПРАВЛЕНИЕ", no_wrap=True, style="bold cyan")
    table.add_column("АРТИКУЛ",   no_wrap=True)
    table.add_column("ТОВАР",     no_wrap=False, max_width=50)

    for page in pages:
        if page.record is not None:
            article = page.record.article or "[yellow]—[/yellow]"
            product = page.record.product_name
        elif page.shipment_number:
            article = "[red]нет в списке[/red]"
            product = ""
        else:
            article = "[dim]номер не найден[/dim]"
            product = ""
        table.add_row(str(page.page_number), page.shipment_number or "-", article, product[:80])

    console.print()
    console.print(table)


# ---------------------------------------------------------------------------
# Основная логика команды
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = _load_settings(args)
    orders = _read_input(args.orders_file, settings.max_input_bytes)
    labels = _read_input(args.labels_file, settings.max_input_bytes)
    out_path = Path(args.out) if args.out else _default_out_path()

    console.print(f"Обработка [bold]{args.labels_file}[/bold] по списку [bold]{args.orders_file}[/bold] …")

    try:
        result = process(
            orders,
            labels,
            resolve_font_source(settings.font, settings.font_timeout),
            font_size=settings.font_size,
            band_height=settings.band_height,
        )
    except LabelsError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    out_path.write_bytes(result.pdf_bytes)
    console.print(f"[green]Файл успешно обработан и сохранён:[/green] {out_path}")
    console.print(
        f"Подписано страниц: [bold]{result.modified_count}[/bold] из {result.page_count}"
        f"  [dim](номеров в списке заказов: {len(result.table)})[/dim]"
    )
    if result.unmatched:
        console.print(f"[yellow]Номера без совпадения в списке заказов:[/yellow] {len(result.unmatched)}")

    if args.show:
        _show_pages(result.pages)


# ---------------------------------------------------------------------------
# Регистрация парсера
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "annotate",
        help="Добавляет артикулы из списка заказов на страницы этикеток.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Находит на каждой странице этикеток номер отправления, ищет его в списке
заказов и добавляет внизу страницы полосу с подписью "Арт: <артикул>".

Примеры:
  artlabel annotate orders.pdf labels.pdf
  artlabel annotate orders.pdf labels.pdf --out result.pdf --show
  artlabel annotate orders.pdf labels.pdf --font builtin:helv
        """,
    )
    p.add_argument("orders_file", metavar="ЗАКАЗЫ.pdf", help="PDF со списком заказов.")
    p.add_argument("labels_file", metavar="ЭТИКЕТКИ.pdf", help="PDF с этикетками (одна на страницу).")
    p.add_argument(
        "--out",
        metavar="ПУТЬ",
        default=None,
        help="Куда сохранить результат (по умолчанию: labels_with_articles_<время>.pdf).",
    )
    p.add_argument(
        "--font",
        metavar="ИСТОЧНИК",
        default=None,
        help="URL, путь к TTF или builtin:<имя> (по умолчанию: ARTLABEL_FONT или Roboto).",
    )
    p.add_argument("--font-size", type=positive_float, default=None, help="Кегль подписи, pt.")
    p.add_argument("--band-height", type=positive_float, default=None, help="Высота добавляемой полосы, pt.")
    p.add_argument(
        "--show",
        action="store_true",
        help="Показать таблицу сопоставления страниц после обработки.",
    )
    p.set_defaults(func=run)
