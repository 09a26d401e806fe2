# line_filter/classifier.py
from __future__ import annotations

import math
import re
from enum import Enum
from typing import Optional, Tuple


class Category(Enum):
    INTEGER = "integers.txt"
    FLOAT = "floats.txt"
    STRING = "strings.txt"

    def file_name(self, prefix: str = "") -> str:
        return f"{prefix}{self.value}"


# только ASCII-цифры: знак, цифры с необязательной точкой (или ".5"), необязательная экспонента
_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def try_parse_number(text: str) -> Optional[float]:
    """
    Разбирает text как десятичное число целиком, без исключений.

    Пробелы по краям не срезаются, inf/nan/подчёркивания не принимаются:
    в таких случаях возвращается None.
    """
    if not _DECIMAL_RE.fullmatch(text):
        return None
    return float(text)


def is_whole(value: float) -> bool:
    # 1e400 -> inf, это всё ещё целое число
    return math.isinf(value) or value.is_integer()


def classify(line: str) -> Tuple[Category, Optional[float]]:
    """Return the category of ``line`` and its numeric value (None for strings)."""
    value = try_parse_number(line)
    if value is None:
        return Category.STRING, None
    if is_whole(value):
        return Category.INTEGER, value
    return Category.FLOAT, value
