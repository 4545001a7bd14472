"""
pdf/label_locator.py — поиск номера отправления на страницах этикеток.

На странице ожидается не более одного номера; если их несколько,
используется первый. Страница без номера или с неизвестным номером
не является ошибкой — она просто остаётся без подписи.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import fitz  # PyMuPDF

from data_model.mapping import MappingTable
from data_model.shipments import SHIPMENT_NUMBER_RE, ShipmentNumber, ShipmentRecord
from pdf.text_stream import page_text

log = logging.getLogger(__name__)


@dataclass(slots=True)
class LabelPage:
    """
    Страница документа этикеток.

    - index:           0-based индекс страницы
    - width, height:   размер страницы до изменения (pt)
    - shipment_number: первый найденный номер или None
    - record:          запись из таблицы соответствия или None
    """
    index: int
    width: float
    height: float
    shipment_number: ShipmentNumber | None = None
    record: ShipmentRecord | None = None

    @property
    def page_number(self) -> int:
        return self.index + 1

    @property
    def matched(self) -> bool:
        return self.record is not None


def find_shipment_number(text: str) -> ShipmentNumber | None:
    m = SHIPMENT_NUMBER_RE.search(text)
    return m.group(1) if m else None


def locate_page(page: fitz.Page, table: MappingTable) -> LabelPage:
    rect = page.rect
    label = LabelPage(index=page.number, width=rect.width, height=rect.height)
    label.shipment_number = find_shipment_number(page_text(page))
    if label.shipment_number is None:
        log.debug("стр. %d: номер отправления не найден", label.page_number)
        return label

    label.record = table.lookup(label.shipment_number)
    if label.record is None:
        log.debug("стр. %d: номер %s отсутствует в списке заказов", label.page_number, label.shipment_number)
    return label


def locate_labels(doc: fitz.Document, table: MappingTable) -> list[LabelPage]:
    """Отчёт по всем страницам в исходном порядке."""
    return [locate_page(page, table) for page in doc]
