# src/households/loader/file_loader.py

from __future__ import annotations

from pathlib import Path
from typing import Iterator, Tuple, Union

from households.core.exceptions import UnreadableInput
from households.logging import get_logger

log = get_logger("file_loader")


def iter_numbered_lines(
    path: Union[str, Path],
    *,
    skip_header: bool = False,
    encoding: str = "utf-8",
) -> Iterator[Tuple[int, str]]:
    """
    Yield ``(lineno, line)`` pairs for every line of an input file.

    Line numbers are 1-based and count physical lines, so with
    ``skip_header`` the first yielded line is number 2. Trailing CR/LF
    characters are stripped.

    The file is closed when the generator is exhausted, closed, or
    garbage collected.

    Raises:
        UnreadableInput: if the file cannot be opened, read, or decoded.
    """
    file_path = Path(path)

    try:
        with file_path.open("r", encoding=encoding, newline=None) as f:
            log.info("Reading input file: %s", file_path)
            for lineno, raw_line in enumerate(f, start=1):
                if skip_header and lineno == 1:
                    continue
                yield lineno, raw_line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as exc:
        log.error("Unable to read %s: %s", file_path, exc)
        raise UnreadableInput() from exc
