"""
Конфигурация — настройки через переменные окружения.

Необязательный файл .env в корне проекта:
  ARTLABEL_FONT=builtin:helv
  ARTLABEL_FONT_SIZE=14
  ARTLABEL_BAND_HEIGHT=25
  ARTLABEL_FONT_TIMEOUT=30
  ARTLABEL_MAX_INPUT_MB=10
"""

from __future__ import annotations

import argparse
import os
import pathlib
from dataclasses import dataclass

from dotenv import load_dotenv

from fonts.source import DEFAULT_FONT_URL, DEFAULT_TIMEOUT
from pdf.annotator import DEFAULT_BAND_HEIGHT, DEFAULT_FONT_SIZE

load_dotenv(pathlib.Path(__file__).resolve().parent.parent / ".env")

_ENV_PREFIX = "ARTLABEL_"


def _positive_float(raw: str, source: str) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ValueError(f"{source}: ожидалось число, получено {raw!r}") from None
    if not 0 < value < float("inf"):
        raise ValueError(f"{source}: значение должно быть больше нуля, получено {raw!r}")
    return value


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(_ENV_PREFIX + name)
    if raw is None or not raw.strip():
        return default
    return _positive_float(raw, _ENV_PREFIX + name)


def positive_float(raw: str) -> float:
    """Тип аргумента argparse: число больше нуля (то же правило, что для переменных окружения)."""
    try:
        return _positive_float(raw, "аргумент")
    except ValueError:
        raise argparse.ArgumentTypeError(f"ожидалось число больше нуля, получено {raw!r}") from None


@dataclass(frozen=True, slots=True)
class Settings:
    font:         str   = DEFAULT_FONT_URL
    font_size:    float = DEFAULT_FONT_SIZE
    band_height:  float = DEFAULT_BAND_HEIGHT
    font_timeout: float = DEFAULT_TIMEOUT
    max_input_mb: float = 10.0

    @property
    def max_input_bytes(self) -> int:
        return int(self.max_input_mb * 1024 * 1024)

    @classmethod
    def from_env(cls) -> Settings:
        return cls(
            font         = os.getenv(_ENV_PREFIX + "FONT") or DEFAULT_FONT_URL,
            font_size    = _env_float("FONT_SIZE",     DEFAULT_FONT_SIZE),
            band_height  = _env_float("BAND_HEIGHT",   DEFAULT_BAND_HEIGHT),
            font_timeout = _env_float("FONT_TIMEOUT",  DEFAULT_TIMEOUT),
            max_input_mb = _env_float("MAX_INPUT_MB",  10.0),
        )
