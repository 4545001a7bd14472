"""
pipeline/orchestrator.py — полный цикл: заказы → таблица → этикетки → PDF.

Последовательность process():
  1. проверка входов                          (MissingInput)
  2. отчёт о заказах → MappingTable           (MalformedDocument, NoRecordsExtracted)
  3. документ этикеток + шрифт                (MalformedDocument, FontUnavailable)
  4. для каждой страницы: номер → запись → подпись
  5. ни одного совпадения                     (NoMatchesFound)
  6. сериализация документа в байты

Частичного результата нет: либо весь документ, либо исключение.
Страницы обрабатываются по порядку; порядок и число страниц сохраняются.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

import fitz  # PyMuPDF

from data_model.mapping import MappingTable
from fonts.source import EmbeddedFont, FontError, FontLoader, load_font
from pdf.annotator import DEFAULT_BAND_HEIGHT, DEFAULT_FONT_SIZE, PageAnnotator
from pdf.label_locator import LabelPage, locate_labels, locate_page
from pdf.segmenter import segment_document
from pdf.text_stream import document_texts, open_pdf

from .errors import FontUnavailable, MalformedDocument, MissingInput, NoMatchesFound, NoRecordsExtracted

log = logging.getLogger(__name__)

ORDERS_LABEL = "список заказов"
LABELS_LABEL = "этикетки"


@dataclass(slots=True)
class ProcessResult:
    """
    Результат успешной обработки.

    - pdf_bytes: документ этикеток с подписями
    - pages:     отчёт по каждой странице этикеток (в исходном порядке)
    - table:     таблица соответствия, построенная по отчёту о заказах
    """
    pdf_bytes: bytes
    pages: list[LabelPage] = field(default_factory=list)
    table: MappingTable = field(default_factory=MappingTable)

    @property
    def modified_count(self) -> int:
        return sum(1 for p in self.pages if p.matched)

    @property
    def page_count(self) -> int:
        return len(self.pages)

    @property
    def unmatched(self) -> list[LabelPage]:
        """Страницы с номером отправления, которого нет в списке заказов."""
        return [p for p in self.pages if p.shipment_number and not p.matched]


def _require(data: bytes | None) -> bytes:
    if not data:
        raise MissingInput()
    return data


def _open(data: bytes, label: str) -> fitz.Document:
    try:
        return open_pdf(data)
    except (RuntimeError, ValueError) as exc:  # fitz.FileDataError ⊂ RuntimeError
        raise MalformedDocument(label, str(exc)) from exc


def build_mapping_table(orders_bytes: bytes | None) -> MappingTable:
    """Строит таблицу соответствия по отчёту о заказах."""
    doc = _open(_require(orders_bytes), ORDERS_LABEL)
    try:
        table = MappingTable.from_records(segment_document(document_texts(doc)))
    finally:
        doc.close()

    if not len(table):
        raise NoRecordsExtracted()
    log.info("список заказов: %d номеров отправлений", len(table))
    if table.duplicates:
        log.info("повторяющихся строк затенено: %d", len(table.duplicates))
    return table


def inspect_labels(orders_bytes: bytes | None, labels_bytes: bytes | None) -> tuple[MappingTable, list[LabelPage]]:
    """Сопоставление без изменения документа (для предварительного отчёта)."""
    orders = _require(orders_bytes)
    labels = _require(labels_bytes)
    table = build_mapping_table(orders)
    doc = _open(labels, LABELS_LABEL)
    try:
        return table, locate_labels(doc, table)
    finally:
        doc.close()


def _load_font(font_loader: FontLoader) -> EmbeddedFont:
    try:
        return load_font(font_loader)
    except FontError as exc:
        raise FontUnavailable(f"Не удалось загрузить шрифт с поддержкой кириллицы: {exc}") from exc


def process(
    orders_bytes: bytes | None,
    labels_bytes: bytes | None,
    font_loader: FontLoader,
    font_size: float = DEFAULT_FONT_SIZE,
    band_height: float = DEFAULT_BAND_HEIGHT,
) -> ProcessResult:
    """
    Добавляет артикулы на страницы этикеток.

    Args:
        orders_bytes: PDF отчёта о заказах.
        labels_bytes: PDF этикеток (по одной на страницу).
        font_loader:  источник байтов шрифта с кириллицей.
        font_size:    кегль подписи (pt).
        band_height:  высота добавляемой полосы (pt).

    Raises:
        MissingInput, MalformedDocument, NoRecordsExtracted,
        FontUnavailable, NoMatchesFound
    """
    orders = _require(orders_bytes)
    labels = _require(labels_bytes)

    table = build_mapping_table(orders)

    doc = _open(labels, LABELS_LABEL)
    try:
        annotator = PageAnnotator(_load_font(font_loader), font_size=font_size, band_height=band_height)

        pages: list[LabelPage] = []
        for page in doc:
            label = locate_page(page, table)
            if label.record is not None:
                annotator.annotate(page, label.record)
            pages.append(label)

        result = ProcessResult(pdf_bytes=b"", pages=pages, table=table)
        if result.modified_count == 0:
            raise NoMatchesFound()

        result.pdf_bytes = doc.tobytes(garbage=3, deflate=True)
    finally:
        doc.close()

    log.info("этикетки: подписано %d из %d страниц", result.modified_count, result.page_count)
    return result
