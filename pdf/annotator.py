"""
pdf/annotator.py — подпись артикула в новой полосе внизу этикетки.

Шаги для одной страницы:
  1. повёрнутая страница нормализуется (Page.remove_rotation)
  2. MediaBox и CropBox: grow_height(extra) → shift_origin(extra), страница растёт вниз
  3. в новой полосе: белый фон + текст "Арт: <артикул>" по центру

Существующее содержимое не переписывается: меняются только границы страницы,
поэтому всё нарисованное ранее остаётся на своих местах.
"""

from __future__ import annotations

import logging

import fitz  # PyMuPDF

from data_model.shipments import ShipmentRecord
from fonts.source import EmbeddedFont
from pdf.geometry import AnnotationBand, PageFrame, plan_band

log = logging.getLogger(__name__)

LABEL_PREFIX        = "Арт: "
DEFAULT_FONT_SIZE   = 14.0
DEFAULT_BAND_HEIGHT = 25.0

_WHITE = (1, 1, 1)
_BLACK = (0, 0, 0)

# Допуск сравнения рамок страницы (pt).
_EPS = 1e-3


def _pdf_array(values: tuple[float, ...]) -> str:
    return "[" + " ".join(f"{v:.6f}".rstrip("0").rstrip(".") for v in values) + "]"


def label_text(record: ShipmentRecord, prefix: str = LABEL_PREFIX) -> str:
    # Пустой артикул тоже подписывается.
    return f"{prefix}{record.article}"


class PageAnnotator:
    """Добавляет полосу с артикулом к страницам одного документа."""

    def __init__(
        self,
        font: EmbeddedFont,
        font_size: float = DEFAULT_FONT_SIZE,
        band_height: float = DEFAULT_BAND_HEIGHT,
        prefix: str = LABEL_PREFIX,
    ) -> None:
        if not font_size > 0 or not band_height > 0:
            raise ValueError(f"кегль и высота полосы должны быть больше нуля: {font_size}, {band_height}")
        self.font = font
        self.font_size = font_size
        self.band_height = band_height
        self.prefix = prefix

    def extend_page(self, page: fitz.Page) -> PageFrame:
        """
        Опускает нижний край видимой области на band_height; возвращает новую рамку.

        Рамка — видимая область (CropBox, а без обрезки — MediaBox) в координатах PDF.
        MediaBox растёт вниз на ту же величину. Если нижний край CropBox был выше
        низа MediaBox, открывшаяся полоса закрашивается белым: содержимое,
        скрытое обрезкой, остаётся скрытым.
        """
        if page.rotation:
            log.warning("стр. %d: поворот %d° снят перед добавлением подписи", page.number + 1, page.rotation)
            page.remove_rotation()

        mb = page.mediabox
        cb = page.cropbox  # y отсчитывается от верхнего края MediaBox вниз
        media = PageFrame.from_box(*mb)
        crop = PageFrame.from_box(cb.x0, mb.y1 - cb.y1, cb.x1, mb.y1 - cb.y0)
        cropped = any(abs(a - b) > _EPS for a, b in zip(crop.as_box(), media.as_box()))

        new_media = media.extend_bottom(self.band_height)
        # set_mediabox удаляет CropBox/TrimBox/BleedBox/ArtBox; верхний край не меняется
        page.set_mediabox(fitz.Rect(*new_media.as_box()))
        if not cropped:
            return new_media

        new_crop = crop.extend_bottom(self.band_height)
        page.parent.xref_set_key(page.xref, "CropBox", _pdf_array(new_crop.as_box()))

        if crop.bottom - media.bottom > _EPS:
            left, top = new_crop.to_page_point(new_crop.x0, crop.bottom)
            right, bottom = new_crop.to_page_point(new_crop.x1, new_crop.bottom)
            page.draw_rect(fitz.Rect(left, top, right, bottom), color=None, fill=_WHITE, width=0)
        return new_crop

    def annotate(self, page: fitz.Page, record: ShipmentRecord) -> AnnotationBand:
        text = label_text(record, self.prefix)
        text_width = self.font.text_width(text, self.font_size)
        text_height = self.font.height_at(self.font_size)

        frame = self.extend_page(page)
        band = plan_band(frame, text, text_width, text_height, self.font_size)

        bx0, by0, bx1, by1 = band.box
        left, top = frame.to_page_point(bx0, by1)
        right, bottom = frame.to_page_point(bx1, by0)
        page.draw_rect(fitz.Rect(left, top, right, bottom), color=None, fill=_WHITE, width=0)

        self.font.embed(page)
        page.insert_text(
            fitz.Point(*frame.to_page_point(band.text_x, band.text_y)),
            text,
            fontsize=self.font_size,
            fontname=self.font.name,
            color=_BLACK,
        )
        log.debug("стр. %d: добавлена подпись %r", page.number + 1, text)
        return band
