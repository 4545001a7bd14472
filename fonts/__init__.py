"""
fonts — шрифт с кириллицей для подписей на этикетках.

Публичное API:
  resolve_font_source(source, timeout) -> FontLoader
  load_font(loader, name)            -> EmbeddedFont
"""

from .source import (
    DEFAULT_FONT_URL,
    EmbeddedFont,
    FontError,
    FontLoader,
    builtin_font,
    fetch_url,
    load_font,
    read_file,
    resolve_font_source,
)

__all__ = [
    "DEFAULT_FONT_URL",
    "EmbeddedFont",
    "FontError",
    "FontLoader",
    "builtin_font",
    "fetch_url",
    "load_font",
    "read_file",
    "resolve_font_source",
]
