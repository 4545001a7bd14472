"""
pdf/segmenter.py — разбиение текста отчёта о заказах на записи.

Алгоритм для одной страницы:
  1. найти все номера отправлений (в порядке сканирования)
  2. блок номера i = текст от конца номера i до начала номера i+1
     (для последнего — до конца страницы)
  3. блок → parse_row_block() → (артикул, название)
  4. запись выпускается всегда, даже с пустым артикулом

Публичное API:
  segment_page(text, page_number)  -> RecordList
  segment_document(texts)          -> RecordList
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from data_model.shipments import SHIPMENT_NUMBER_RE, RecordList, ShipmentRecord
from pdf.order_patterns import ROW_RULES, RowRule, parse_row_block

log = logging.getLogger(__name__)


def segment_page(
    text: str,
    page_number: int = 1,
    rules: list[RowRule] = ROW_RULES,
) -> RecordList:
    """Разбивает текст одной страницы отчёта на записи."""
    # Порядок совпадений важен: границы блоков задаёт следующий номер.
    matches = list(SHIPMENT_NUMBER_RE.finditer(text))
    records: RecordList = []

    for i, m in enumerate(matches):
        end = matches[i + 1].start() if i + 1 < len(matches) else len(text)
        block = text[m.end():end]
        parsed = parse_row_block(block, rules)

        if parsed.rule is None:
            log.debug("стр. %d, %s: артикул не найден в %r", page_number, m.group(1), block.strip())
        else:
            log.debug("стр. %d, %s: правило %s → %r", page_number, m.group(1), parsed.rule, parsed.article)

        records.append(ShipmentRecord(
            shipment_number=m.group(1),
            article=parsed.article,
            product_name=parsed.product_name,
            page=page_number,
        ))

    return records


def segment_document(texts: Iterable[str]) -> RecordList:
    """Записи всех страниц в порядке страниц, затем порядке сканирования."""
    records: RecordList = []
    for page_number, text in enumerate(texts, start=1):
        records.extend(segment_page(text, page_number))
    return records
