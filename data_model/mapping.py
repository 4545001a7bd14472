"""
data_model/mapping.py — таблица соответствия номер отправления → запись.

Таблица строится один раз по отчёту о заказах и далее только читается.
При повторе номера выигрывает первая запись в порядке сканирования;
поздние дубликаты затеняются (не объединяются и не считаются ошибкой).
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from .shipments import RecordList, ShipmentNumber, ShipmentRecord

log = logging.getLogger(__name__)


class MappingTable:
    """Поиск ShipmentRecord по номеру отправления (first-wins)."""

    __slots__ = ("_by_number", "_duplicates")

    def __init__(self) -> None:
        self._by_number: dict[ShipmentNumber, ShipmentRecord] = {}
        self._duplicates: RecordList = []

    @classmethod
    def from_records(cls, records: Iterable[ShipmentRecord]) -> MappingTable:
        table = cls()
        for record in records:
            table.insert(record)
        return table

    def insert(self, record: ShipmentRecord) -> None:
        """Добавляет запись; повтор номера запоминается, но не заменяет первую."""
        first = self._by_number.get(record.shipment_number)
        if first is None:
            self._by_number[record.shipment_number] = record
            return
        self._duplicates.append(record)
        if first.article != record.article:
            log.warning(
                "Номер %s повторяется с другим артикулом (%r, стр. %d) — используется %r (стр. %d)",
                record.shipment_number, record.article, record.page, first.article, first.page,
            )

    def lookup(self, shipment_number: ShipmentNumber) -> ShipmentRecord | None:
        return self._by_number.get(shipment_number)

    @property
    def duplicates(self) -> RecordList:
        """Затенённые записи (повторы уже известных номеров)."""
        return list(self._duplicates)

    def __contains__(self, shipment_number: object) -> bool:
        return shipment_number in self._by_number

    def __len__(self) -> int:
        return len(self._by_number)

    def __iter__(self) -> Iterator[ShipmentRecord]:
        # dict сохраняет порядок вставки = порядок сканирования
        return iter(self._by_number.values())
