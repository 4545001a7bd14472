"""
pdf/order_patterns.py — грамматика строки отчёта о заказах.

Блок строки — текст между концом одного номера отправления и началом
следующего. Каждое правило RowRule содержит:
  - name   : имя правила (для логов и отчётов)
  - regex  : скомпилированный шаблон
  - extract: функция Match → RowParse (блок доступен как m.string)

Правила проверяются по порядку; первое совпавшее побеждает.
Если не совпало ни одно — артикул пустой, название = весь блок.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable


@dataclass(frozen=True, slots=True)
class RowParse:
    article: str
    product_name: str
    rule: str | None      # None → ни одно правило не сработало


@dataclass(frozen=True, slots=True)
class RowRule:
    name: str
    regex: re.Pattern[str]
    extract: Callable[[re.Match[str]], RowParse]


# Ведущие номера строк, просочившиеся в название товара.
_LEADING_INDEX_RE = re.compile(r"^\s*\d+\s*")


def clean_product_name(text: str) -> str:
    return _LEADING_INDEX_RE.sub("", text, count=1).strip()


def _full_row(m: re.Match[str]) -> RowParse:
    # Количество и 4-значный номер этикетки: только якоря, не сохраняются.
    return RowParse(
        article=m.group("article").strip(),
        product_name=m.group("product").strip(),
        rule="full_row",
    )


def _article_token(m: re.Match[str]) -> RowParse:
    return RowParse(
        article=m.group("article"),
        product_name=m.string[: m.start("article")].strip(),
        rule="article_token",
    )


ROW_RULES: list[RowRule] = [
    # -------------------------------------------------------------------------
    # Полная строка: <название> <артикул> <кол-во> <NNNN> [<индекс след. строки>]
    # напр. "Деталь под покраску F/034 1 1785 2"
    # -------------------------------------------------------------------------
    RowRule(
        name="full_row",
        regex=re.compile(
            r"(?P<product>.*?)\s+(?P<article>\S+)\s+(?P<qty>\d+)\s+(?P<label>\d{4})\s*(?:\d+\s*)?$"
        ),
        extract=_full_row,
    ),

    # -------------------------------------------------------------------------
    # Запасной вариант: первый токен вида "F/034" или "AB-12"
    # -------------------------------------------------------------------------
    RowRule(
        name="article_token",
        regex=re.compile(r"(?P<article>[A-Za-z0-9]+[-/][A-Za-z0-9]+)"),
        extract=_article_token,
    ),
]


def parse_row_block(block: str, rules: list[RowRule] = ROW_RULES) -> RowParse:
    """Разбирает блок строки на (артикул, название) первым подходящим правилом."""
    block = block.strip()
    for rule in rules:
        m = rule.regex.search(block)
        if m:
            parsed = rule.extract(m)
            return RowParse(
                article=parsed.article,
                product_name=clean_product_name(parsed.product_name),
                rule=parsed.rule,
            )
    return RowParse(article="", product_name=clean_product_name(block), rule=None)
