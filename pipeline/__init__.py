"""
pipeline — обработка пары документов (список заказов + этикетки).

Публичное API:
  process(orders_bytes, labels_bytes, font_loader, …) -> ProcessResult
  build_mapping_table(orders_bytes)                  -> MappingTable
  inspect_labels(orders_bytes, labels_bytes)         -> (MappingTable, list[LabelPage])

Ошибки:
  LabelsError ← MissingInput, NoRecordsExtracted, NoMatchesFound,
                FontUnavailable, MalformedDocument
"""

from .errors import (
    ErrorKind,
    FontUnavailable,
    LabelsError,
    MalformedDocument,
    MissingInput,
    NoMatchesFound,
    NoRecordsExtracted,
)
from .orchestrator import ProcessResult, build_mapping_table, inspect_labels, process

__all__ = [
    "ErrorKind",
    "FontUnavailable",
    "LabelsError",
    "MalformedDocument",
    "MissingInput",
    "NoMatchesFound",
    "NoRecordsExtracted",
    "ProcessResult",
    "build_mapping_table",
    "inspect_labels",
    "process",
]
