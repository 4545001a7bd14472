"""
pdf/text_stream.py — извлечение текста страниц PDF.

Архитектура:
  bytes → fitz.open(stream=…) → страницы → page.get_text("dict", sort=True)
  → блоки → строки → spans → " ".join(...) → одна строка на страницу

Фрагменты склеиваются пробелом в порядке чтения (сверху вниз, слева направо);
этого достаточно для поиска номеров отправлений и разбора строк отчёта.
"""

from __future__ import annotations

import fitz  # PyMuPDF


def open_pdf(data: bytes) -> fitz.Document:
    """
    Открывает PDF из памяти.

    Raises:
        ValueError:   документ не PDF или не содержит страниц.
        RuntimeError: PyMuPDF не смог разобрать данные (fitz.FileDataError).
    """
    doc = fitz.open(stream=data, filetype="pdf")
    if not doc.is_pdf or doc.page_count == 0:
        doc.close()
        raise ValueError("документ не содержит страниц PDF")
    return doc


def page_fragments(page: fitz.Page) -> list[str]:
    """Текстовые фрагменты (spans) страницы в порядке чтения."""
    fragments: list[str] = []
    page_dict = page.get_text("dict", sort=True)
    for block in page_dict.get("blocks", []):
        if block.get("type") != 0:  # 1 = изображение
            continue
        for line in block.get("lines", []):
            for span in line.get("spans", []):
                text = span.get("text", "")
                if text:
                    fragments.append(text)
    return fragments


def page_text(page: fitz.Page) -> str:
    return " ".join(page_fragments(page))


def document_texts(doc: fitz.Document) -> list[str]:
    """Текст каждой страницы; индекс списка = номер страницы - 1."""
    return [page_text(page) for page in doc]
