"""
data_model/shipments.py — записи отчёта о заказах.

ShipmentRecord — одна строка отчёта: номер отправления + артикул и название
товара, восстановленные из извлечённого текста PDF.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

# ---------------------------------------------------------------------------
# Псевдонимы типов
# ---------------------------------------------------------------------------

# Шаблон: \d{8,12}-\d{4}-\d{1,2}  напр. "0149711785-0110-1"
ShipmentNumber = str

SHIPMENT_NUMBER_PATTERN = r"\d{8,12}-\d{4}-\d{1,2}"
SHIPMENT_NUMBER_RE = re.compile(f"({SHIPMENT_NUMBER_PATTERN})")


# ---------------------------------------------------------------------------
# ShipmentRecord
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ShipmentRecord:
    """
    Запись отчёта о заказах.

    - shipment_number: естественный ключ, всегда соответствует шаблону
    - article:         артикул, напр. "F/034"; пустая строка = не найден
    - product_name:    название товара без ведущих номеров строк
    - page:            номер страницы отчёта (1-based), где найдена запись
    """
    shipment_number: ShipmentNumber
    article: str = ""
    product_name: str = ""
    page: int = 1

    def __post_init__(self) -> None:
        if not SHIPMENT_NUMBER_RE.fullmatch(self.shipment_number):
            raise ValueError(f"Некорректный номер отправления: {self.shipment_number!r}")

    @property
    def has_article(self) -> bool:
        return bool(self.article)


# Записи в порядке сканирования документа.
RecordList = list[ShipmentRecord]
