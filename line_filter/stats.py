# line_filter/stats.py
from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional

from .classifier import Category


def _fmt(value: Optional[float]) -> str:
    if value is None or (isinstance(value, float) and math.isnan(value)):
        return "n/a"
    return str(value)


@dataclass
class Stats:
    integer_count: int = 0
    float_count: int = 0
    string_count: int = 0

    float_sum: float = 0.0
    float_min: Optional[float] = None
    float_max: Optional[float] = None

    shortest_string: Optional[int] = None
    longest_string: Optional[int] = None

    read_errors: int = 0
    write_errors: int = 0
    errors: List[str] = field(default_factory=list)

    # -------- UPDATE --------

    def record_integer(self) -> None:
        self.integer_count += 1

    def record_float(self, value: float) -> None:
        self.float_count += 1
        self.float_sum += value
        if self.float_min is None or value < self.float_min:
            self.float_min = value
        if self.float_max is None or value > self.float_max:
            self.float_max = value

    def record_string(self, line: str) -> None:
        self.string_count += 1
        length = len(line)
        if self.shortest_string is None or length < self.shortest_string:
            self.shortest_string = length
        if self.longest_string is None or length > self.longest_string:
            self.longest_string = length

    def record(self, category: Category, line: str, value: Optional[float]) -> None:
        if category is Category.INTEGER:
            self.record_integer()
        elif category is Category.FLOAT:
            self.record_float(value)
        else:
            self.record_string(line)

    # -------- READ --------

    @property
    def total_lines(self) -> int:
        return self.integer_count + self.float_count + self.string_count

    @property
    def average(self) -> float:
        if self.float_count == 0:
            return math.nan
        return self.float_sum / self.float_count

    def short_report(self) -> str:
        return (
            f"Integers: {self.integer_count}\n"
            f"Floats:   {self.float_count}\n"
            f"Strings:  {self.string_count}"
        )

    def full_report(self) -> str:
        return (
            f"Integers:               {self.integer_count}\n"
            f"Floats:                 {self.float_count}\n"
            f"Strings:                {self.string_count}\n"
            f"Float min:              {_fmt(self.float_min)}\n"
            f"Float max:              {_fmt(self.float_max)}\n"
            f"Float sum:              {self.float_sum}\n"
            f"Float average:          {_fmt(self.average)}\n"
            f"Shortest string length: {_fmt(self.shortest_string)}\n"
            f"Longest string length:  {_fmt(self.longest_string)}"
        )

    def log_summary(self, logger: logging.Logger) -> None:
        logger.info("---------------- FILTER SUMMARY ----------------")
        logger.info(f"Lines processed:      {self.total_lines}")
        logger.info(f"Integers:             {self.integer_count}")
        logger.info(f"Floats:               {self.float_count}")
        logger.info(f"Strings:              {self.string_count}")
        logger.info(f"Read errors:          {self.read_errors}")
        logger.info(f"Write errors:         {self.write_errors}")

        if self.errors:
            logger.info("Errors encountered:")
            for e in self.errors:
                logger.info(f"  {e}")
