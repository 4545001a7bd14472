"""
data_model — структуры данных artlabel.

Использование:
  from data_model import ShipmentRecord, MappingTable

Модули:
  shipments — ShipmentRecord, ShipmentNumber, RecordList, SHIPMENT_NUMBER_RE
  mapping   — MappingTable (номер отправления → первая запись)
"""

from .shipments import (
    SHIPMENT_NUMBER_PATTERN,
    SHIPMENT_NUMBER_RE,
    RecordList,
    ShipmentNumber,
    ShipmentRecord,
)
from .mapping import MappingTable

__all__ = [
    # shipments
    "SHIPMENT_NUMBER_PATTERN",
    "SHIPMENT_NUMBER_RE",
    "RecordList",
    "ShipmentNumber",
    "ShipmentRecord",
    # mapping
    "MappingTable",
]
