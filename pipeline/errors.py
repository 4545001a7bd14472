"""
pipeline/errors.py — ошибки уровня документа.

Только эти условия прерывают обработку; ошибки разбора отдельных строк
и страниц восстанавливаются на месте и наружу не выходят.
Сообщения предназначены для пользователя (на русском).
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    MISSING_INPUT        = "missing_input"
    NO_RECORDS_EXTRACTED = "no_records_extracted"
    NO_MATCHES_FOUND     = "no_matches_found"
    FONT_UNAVAILABLE     = "font_unavailable"
    MALFORMED_DOCUMENT   = "malformed_document"


class LabelsError(Exception):
    """Базовая ошибка обработки; `kind` — класс ошибки, str(e) — сообщение."""

    kind: ErrorKind
    default_message: str = "Произошла ошибка при обработке файлов."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class MissingInput(LabelsError):
    kind = ErrorKind.MISSING_INPUT
    default_message = "Пожалуйста, загрузите оба файла."


class NoRecordsExtracted(LabelsError):
    kind = ErrorKind.NO_RECORDS_EXTRACTED
    default_message = "Не удалось найти данные о заказах в файле со списком."


class NoMatchesFound(LabelsError):
    kind = ErrorKind.NO_MATCHES_FOUND
    default_message = "Не удалось найти совпадения номеров отправлений между файлами."


class FontUnavailable(LabelsError):
    kind = ErrorKind.FONT_UNAVAILABLE
    default_message = "Не удалось загрузить шрифт с поддержкой кириллицы."


class MalformedDocument(LabelsError):
    kind = ErrorKind.MALFORMED_DOCUMENT
    default_message = "Файл не является корректным PDF."

    def __init__(self, document: str, detail: str = "") -> None:
        self.document = document
        message = f"Файл «{document}» не является корректным PDF"
        super().__init__(f"{message}: {detail}" if detail else f"{message}.")
