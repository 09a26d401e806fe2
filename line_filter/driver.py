# line_filter/driver.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterator, List, Optional

from tqdm import tqdm

from .classifier import classify
from .config import Config
from .errors import FileReadError
from .file_router import route_line
from .stats import Stats

logger = logging.getLogger("line_filter.driver")

_TERMINATORS = ("\r\n", "\n", "\r")


def _split_terminated(text: str) -> List[str]:
    # одна строка из бинарного файла: срезаем терминатор, одиночный \r тоже разделитель
    for ending in _TERMINATORS:
        if text.endswith(ending):
            text = text[: -len(ending)]
            break
    return text.split("\r")


def iter_lines(path: Path) -> Iterator[str]:
    """
    Yield the lines of ``path`` without their terminators.

    Each line is decoded on its own, so every line before an undecodable
    one is still yielded. Raises FileReadError on open/read/decode failure.
    """
    try:
        with path.open("rb") as f:
            for raw in f:
                yield from _split_terminated(raw.decode("utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise FileReadError(path, e) from e


def process_line(
    line: str,
    config: Config,
    stats: Stats,
    log: logging.Logger,
) -> None:
    category, value = classify(line)
    route_line(config, category, line, stats=stats, log=log)
    stats.record(category, line, value)


def run(
    config: Config,
    stats: Optional[Stats] = None,
    log: Optional[logging.Logger] = None,
    progress: bool = False,
) -> Stats:
    """
    Обрабатывает входные файлы строго по порядку, строки строго по порядку.

    Ошибка чтения одного файла логируется и не прерывает прогон.
    Возвращает накопленную статистику.
    """
    stats = stats if stats is not None else Stats()
    log = log if log is not None else logger

    files = config.input_files
    if progress:
        files = tqdm(files, desc="Filtering files", unit="file")

    for path in files:
        log.info(f"[FILE] Start: {path}")
        lines_before = stats.total_lines
        try:
            for line in iter_lines(path):
                process_line(line, config, stats, log)
        except FileReadError as e:
            stats.read_errors += 1
            msg = f"[READ] {e}"
            log.error(msg, exc_info=config.verbose)
            stats.errors.append(msg)
            continue
        log.info(f"[FILE] Done:  {path} ({stats.total_lines - lines_before} lines)")

    return stats
