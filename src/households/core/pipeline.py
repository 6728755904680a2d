from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from households.config import get_config
from households.core.context import ImportContext
from households.core.exceptions import RecordError
from households.loader import iter_numbered_lines, parse_line
from households.logging import get_logger
from households.registry import HouseholdIndex

log = get_logger("pipeline")


def import_numbered_lines(
    numbered_lines: Iterable[Tuple[int, str]],
    index: Optional[HouseholdIndex] = None,
    *,
    errors: Optional[List[RecordError]] = None,
) -> HouseholdIndex:
    """
    Parse ``(lineno, line)`` pairs into ``index``, one line at a time.

    A bad line (blank lines included) is logged, appended to ``errors``
    (when given) and skipped; it never stops the import.
    """
    if index is None:
        index = HouseholdIndex()

    for lineno, line in numbered_lines:
        try:
            individual = parse_line(line, lineno)
        except RecordError as exc:
            log.warning("Unable to parse record: %s", exc)
            if errors is not None:
                errors.append(exc)
            continue

        index.insert(individual)

    return index


def import_lines(
    lines: Iterable[str],
    index: Optional[HouseholdIndex] = None,
    *,
    start_line: int = 1,
    errors: Optional[List[RecordError]] = None,
) -> HouseholdIndex:
    """Number raw lines from ``start_line`` and import them."""
    return import_numbered_lines(
        enumerate(lines, start=start_line),
        index,
        errors=errors,
    )


class Pipeline:
    """
    Orchestrates a single file import.
    No parsing logic lives here.
    """

    def __init__(self, context: ImportContext):
        self.ctx = context
        self.log = context.logger

    def run(self) -> HouseholdIndex:
        """
        Import ``ctx.input_path`` into a new HouseholdIndex.

        ``UnreadableInput`` propagates to the caller; no partial index is
        returned in that case.
        """
        self.log.info("Import starting: %s", self.ctx.input_path)

        lines_read = 0

        def _counted(numbered):
            nonlocal lines_read
            for item in numbered:
                lines_read += 1
                yield item

        numbered = iter_numbered_lines(
            self.ctx.input_path,
            skip_header=self.ctx.skip_header,
            encoding=self.ctx.encoding,
        )
        index = import_numbered_lines(_counted(numbered), errors=self.ctx.errors)

        self.ctx.stats.update(
            {
                "lines_read": lines_read,
                "records_imported": index.occupant_count(),
                "records_rejected": len(self.ctx.errors),
                "households": len(index),
                "occupants": index.occupant_count(),
            }
        )

        self.log.info(
            "Import complete: households=%d occupants=%d rejected=%d",
            len(index),
            index.occupant_count(),
            len(self.ctx.errors),
        )
        return index


def build_context(
    input_path: Union[str, Path],
    *,
    skip_header: Optional[bool] = None,
) -> ImportContext:
    """Create an ImportContext with defaults taken from configuration."""
    cfg = get_config()
    return ImportContext(
        config=cfg,
        logger=log,
        input_path=str(input_path),
        skip_header=cfg.skip_header if skip_header is None else bool(skip_header),
        encoding=cfg.encoding,
    )


def import_households(
    input_path: Union[str, Path],
    skip_header: Optional[bool] = None,
) -> HouseholdIndex:
    """Import a record file and return the resulting HouseholdIndex."""
    return Pipeline(build_context(input_path, skip_header=skip_header)).run()
