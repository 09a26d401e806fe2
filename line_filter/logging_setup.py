# line_filter/logging_setup.py
from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional


def setup_logger(verbose: bool = False, log_file: Optional[Path] = None) -> logging.Logger:
    """
    Создаёт логгер 'line_filter', который пишет:
    - в stderr (stdout занят отчётами статистики)
    - опционально в файл log_file

    Уровень WARNING по умолчанию, INFO при verbose.
    Если хендлеры уже есть — не добавляем их повторно.
    """
    logger = logging.getLogger("line_filter")
    logger.setLevel(logging.INFO if verbose else logging.WARNING)

    if logger.handlers:
        return logger

    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(message)s",
        "%Y-%m-%d %H:%M:%S",
    )

    # Консоль
    ch = logging.StreamHandler(sys.stderr)
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    # Файл
    if log_file is not None:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)
        logger.info(f"Logging to {log_file}")

    return logger
