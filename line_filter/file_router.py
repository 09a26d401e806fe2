# line_filter/file_router.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from .classifier import Category
from .config import Config
from .errors import FileWriteError
from .stats import Stats


__all__ = ["write_line", "route_line"]

logger = logging.getLogger("line_filter.router")


def write_line(output_path: Path, file_name: str, data: str, append: bool) -> Path:
    """
    Пишет одну строку data в output_path/file_name.

    - Создаёт каталог (рекурсивно) и файл, если их нет.
    - append=True: дописывает в конец файла.
    - append=False: файл обрезается при КАЖДОМ вызове, т.е. после прогона
      в файле остаётся только последняя записанная строка.
    - Файл открывается и закрывается внутри одного вызова.

    Raises FileWriteError on any OSError.
    """
    file_path = output_path / file_name
    mode = "a" if append else "w"
    try:
        output_path.mkdir(parents=True, exist_ok=True)
        with file_path.open(mode, encoding="utf-8") as f:
            f.write(data)
            f.write("\n")
    except OSError as e:
        raise FileWriteError(file_path, e) from e
    return file_path


def route_line(
    config: Config,
    category: Category,
    line: str,
    *,
    stats: Stats,
    log: Optional[logging.Logger] = None,
) -> bool:
    """
    Единая точка записи одной классифицированной строки.

    Ошибка записи не прерывает прогон: логируем, считаем, возвращаем False.
    """
    log = log if log is not None else logger
    file_name = category.file_name(config.prefix)
    try:
        write_line(config.output_path, file_name, line, config.append)
    except FileWriteError as e:
        stats.write_errors += 1
        msg = f"[WRITE] {e}"
        log.error(msg, exc_info=config.verbose)
        stats.errors.append(msg)
        return False

    log.debug(f"[WRITE] {category.name} -> {file_name}: {line!r}")
    return True
