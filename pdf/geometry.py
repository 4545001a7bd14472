"""
pdf/geometry.py — геометрия страницы и полосы подписи.

Все величины — в координатах PDF (начало внизу слева, ось y вверх).
Страница описывается размером и независимым смещением начала координат:

  grow_height(extra)   — увеличивает высоту; в PDF это поднимает ВЕРХНИЙ край
  shift_origin(dy)     — сдвигает начало координат вниз на dy

Композиция grow_height(extra) → shift_origin(extra) оставляет верхний край
на месте и опускает нижний на extra: существующее содержимое остаётся там же,
а под старым нижним краем появляется свободная полоса.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PageFrame:
    x0: float
    y0: float       # нижний край
    width: float
    height: float

    @classmethod
    def from_box(cls, x0: float, y0: float, x1: float, y1: float) -> PageFrame:
        return cls(x0=x0, y0=y0, width=x1 - x0, height=y1 - y0)

    @property
    def x1(self) -> float:
        return self.x0 + self.width

    @property
    def top(self) -> float:
        return self.y0 + self.height

    @property
    def bottom(self) -> float:
        return self.y0

    def as_box(self) -> tuple[float, float, float, float]:
        return (self.x0, self.y0, self.x1, self.top)

    def grow_height(self, extra: float) -> PageFrame:
        return PageFrame(self.x0, self.y0, self.width, self.height + extra)

    def shift_origin(self, dy: float) -> PageFrame:
        return PageFrame(self.x0, self.y0 - dy, self.width, self.height)

    def extend_bottom(self, extra: float) -> PageFrame:
        return self.grow_height(extra).shift_origin(extra)

    def to_page_point(self, x: float, y: float) -> tuple[float, float]:
        """PDF → координаты страницы PyMuPDF (начало вверху слева, ось y вниз)."""
        return x - self.x0, self.top - y


@dataclass(frozen=True, slots=True)
class AnnotationBand:
    """
    Подпись в новой полосе: фон + текст.

    - text:            отображаемый текст
    - font_size:       кегль (pt)
    - text_x, text_y:  начало базовой линии текста (PDF)
    - box:             фон (x0, y0, x1, y1) в PDF
    """
    text: str
    font_size: float
    text_x: float
    text_y: float
    box: tuple[float, float, float, float]


def plan_band(
    frame: PageFrame,
    text: str,
    text_width: float,
    text_height: float,
    font_size: float,
    bottom_inset: float = 5.0,
    pad_x: float = 5.0,
    pad_y: float = 2.0,
) -> AnnotationBand:
    """
    Размещает подпись по центру у нижнего края уже расширенной страницы.

    Фон больше рамки текста на pad_x по горизонтали и pad_y по вертикали
    с каждой стороны.
    """
    text_x = frame.x0 + (frame.width - text_width) / 2
    text_y = frame.bottom + bottom_inset
    box = (
        text_x - pad_x,
        text_y - pad_y,
        text_x + text_width + pad_x,
        text_y - pad_y + text_height + 2 * pad_y,
    )
    return AnnotationBand(text=text, font_size=font_size, text_x=text_x, text_y=text_y, box=box)
