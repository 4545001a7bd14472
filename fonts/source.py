"""
fonts/source.py — загрузка шрифта для подписей на этикетках.

Источник шрифта задаётся строкой:
  https://…/font.ttf   скачивается через requests
  builtin:<имя>        встроенный шрифт PyMuPDF, напр. builtin:helv (Nimbus Sans с кириллицей)
  <путь>               файл TTF/OTF на диске

Публичное API:
  resolve_font_source(source, timeout) -> FontLoader
  load_font(loader, name)            -> EmbeddedFont
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable

import fitz  # PyMuPDF
import requests

log = logging.getLogger(__name__)

DEFAULT_FONT_URL = "https://themes.googleusercontent.com/static/fonts/roboto/v9/W5F8_SL0XFawnjxHGsZjJA.ttf"
DEFAULT_TIMEOUT  = 30
_BUILTIN_PREFIX  = "builtin:"

# Шрифт обязан отрисовать префикс подписи и кириллицу в названиях.
_REQUIRED_GLYPHS = "Арт:"

FontLoader = Callable[[], bytes]


class FontError(Exception):
    """Шрифт не удалось получить или он непригоден для подписи."""


class EmbeddedFont:
    """
    Шрифт для встраивания в страницы PDF.

    Метрики считаются по fitz.Font; в страницу шрифт вставляется
    под ресурсным именем `name` (Page.insert_font).
    """

    __slots__ = ("name", "buffer", "_font")

    def __init__(self, buffer: bytes, name: str = "artlabel") -> None:
        if not buffer:
            raise FontError("пустой файл шрифта")
        try:
            font = fitz.Font(fontbuffer=buffer)
        except Exception as exc:  # mupdf.FzErrorBase не наследует RuntimeError
            raise FontError(f"файл шрифта не распознан: {exc}") from exc
        missing = [ch for ch in _REQUIRED_GLYPHS if not font.has_glyph(ord(ch))]
        if missing:
            raise FontError(
                f"шрифт {font.name!r} не содержит символов: {''.join(missing)!r}"
            )
        self.name = name
        self.buffer = buffer
        self._font = font

    @property
    def family(self) -> str:
        return self._font.name

    def text_width(self, text: str, size: float) -> float:
        return self._font.text_length(text, fontsize=size)

    def height_at(self, size: float) -> float:
        """Высота строки от нижнего выносного до верхнего выносного элемента."""
        return (self._font.ascender - self._font.descender) * size

    def embed(self, page: fitz.Page) -> None:
        page.insert_font(fontname=self.name, fontbuffer=self.buffer)


# ---------------------------------------------------------------------------
# Источники
# ---------------------------------------------------------------------------

def fetch_url(url: str, timeout: float = DEFAULT_TIMEOUT) -> bytes:
    try:
        resp = requests.get(url, timeout=timeout)
        resp.raise_for_status()
    except requests.RequestException as exc:
        raise FontError(f"не удалось скачать {url}: {exc}") from exc
    log.debug("шрифт скачан: %s (%d байт)", url, len(resp.content))
    return resp.content


def read_file(path: str | Path) -> bytes:
    try:
        return Path(path).read_bytes()
    except OSError as exc:
        raise FontError(f"не удалось прочитать {path}: {exc}") from exc


def builtin_font(name: str) -> bytes:
    try:
        buffer = fitz.Font(name).buffer
    except Exception as exc:  # mupdf.FzErrorBase
        raise FontError(f"встроенный шрифт {name!r} недоступен: {exc}") from exc
    if not buffer:
        raise FontError(f"встроенный шрифт {name!r} недоступен: пустой буфер")
    return bytes(buffer)


def resolve_font_source(source: str | None, timeout: float = DEFAULT_TIMEOUT) -> FontLoader:
    """Возвращает загрузчик байтов шрифта по строке-источнику."""
    source = (source or DEFAULT_FONT_URL).strip()
    if source.startswith(("http://", "https://")):
        return lambda: fetch_url(source, timeout)
    if source.startswith(_BUILTIN_PREFIX):
        name = source[len(_BUILTIN_PREFIX):]
        return lambda: builtin_font(name)
    return lambda: read_file(source)


def load_font(loader: FontLoader, name: str = "artlabel") -> EmbeddedFont:
    """Получает байты шрифта и проверяет, что он пригоден для подписи."""
    return EmbeddedFont(loader(), name=name)
