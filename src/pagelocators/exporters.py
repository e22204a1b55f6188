from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from openpyxl import Workbook
from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE

from .models import LOCATOR_COLUMNS, LocatorRecord

PAGE_SOURCE_HEADER = "Page Source,"
LOCATORS_SHEET_TITLE = "Locators"

logger = logging.getLogger("pagelocators.export")


def flatten_page_source(page_source: str) -> str:
    return page_source.replace("\n", "").replace("\r", "")


def write_page_source_csv(page_source: str, path: Path | str) -> bool:
    """Dump the raw markup as a header line plus one unbroken line.

    No quoting is applied. Returns ``False`` (after logging) when the file
    cannot be written.
    """
    target = Path(path)
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        with target.open("w", encoding="utf-8", newline="\n") as handle:
            handle.write(PAGE_SOURCE_HEADER)
            handle.write("\n")
            handle.write(flatten_page_source(page_source))
    except (OSError, ValueError):
        logger.exception("Failed to write page source to %s", target)
        return False
    logger.info("Page source written to %s successfully.", target)
    return True


def _cell_text(value: str) -> str:
    # Control characters are rejected by the xlsx writer.
    return ILLEGAL_CHARACTERS_RE.sub("", value)


def write_locators_xlsx(records: Iterable[LocatorRecord], path: Path | str) -> bool:
    target = Path(path)
    workbook = Workbook()
    sheet = workbook.active
    sheet.title = LOCATORS_SHEET_TITLE
    sheet.append(list(LOCATOR_COLUMNS))
    count = 0
    for record in records:
        sheet.append([_cell_text(value) for value in record.as_row()])
        # Keep values such as "=1+1" literal instead of formulas.
        for cell in sheet[sheet.max_row]:
            cell.data_type = "s"
        count += 1

    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        workbook.save(target)
    except (OSError, ValueError):
        logger.exception("Failed to write locators to %s", target)
        return False
    finally:
        workbook.close()
    logger.info("%d locators written to %s successfully.", count, target)
    return True
