from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable

from .browser_manager import fetch_rendered_html
from .config import RunConfig
from .dom_extractor import extract_dom_snapshot, parse_html
from .exporters import write_locators_xlsx, write_page_source_csv
from .locator_generator import extract_locators
from .models import LocatorRecord

HtmlFetcher = Callable[[str, RunConfig], str]

logger = logging.getLogger("pagelocators.pipeline")


@dataclass(slots=True)
class RunResult:
    url: str
    page_source: str
    records: list[LocatorRecord] = field(default_factory=list)
    element_count: int = 0
    page_source_written: bool = False
    locators_written: bool = False

    @property
    def ok(self) -> bool:
        return self.page_source_written and self.locators_written


def run(config: RunConfig | None = None, fetcher: HtmlFetcher | None = None) -> RunResult:
    """Fetch one page, derive its locator table and write both output files.

    Fetch failures propagate. Export failures are logged and reflected in the
    result; one failed export never skips the other.
    """
    config = config or RunConfig()
    fetch = fetcher or fetch_rendered_html

    page_source = fetch(config.url, config)
    logger.info("Fetched %d characters from %s", len(page_source), config.url)
    if config.echo_page_source:
        print("Page Source: \n" + page_source)

    tree = parse_html(page_source)
    snapshot = extract_dom_snapshot(tree)
    records = extract_locators(tree)
    logger.info(
        "Extracted %d locator rows from %d elements (%d distinct tags).",
        len(records),
        snapshot.node_count,
        len(snapshot.tag_histogram),
    )

    result = RunResult(
        url=config.url,
        page_source=page_source,
        records=records,
        element_count=snapshot.node_count,
    )
    result.page_source_written = write_page_source_csv(page_source, config.page_source_path)
    result.locators_written = write_locators_xlsx(records, config.locators_path)
    return result
