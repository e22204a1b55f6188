from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Literal, Mapping

DEFAULT_URL = "https://www.wikipedia.org/"
PAGE_SOURCE_FILENAME = "PageSource.csv"
LOCATORS_FILENAME = "Locators.xlsx"

WaitUntil = Literal["commit", "domcontentloaded", "load", "networkidle"]
_WAIT_UNTIL_VALUES = ("commit", "domcontentloaded", "load", "networkidle")
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(slots=True)
class RunConfig:
    url: str = DEFAULT_URL
    page_source_path: Path = Path(PAGE_SOURCE_FILENAME)
    locators_path: Path = Path(LOCATORS_FILENAME)
    headless: bool = True
    navigation_timeout_ms: int = 30_000
    wait_until: WaitUntil = "load"
    echo_page_source: bool = False

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunConfig:
        env = os.environ if environ is None else environ
        defaults = cls()

        output_dir = (env.get("PAGELOCATORS_OUTPUT_DIR") or "").strip()
        base = Path(output_dir) if output_dir else None

        wait_until = (env.get("PAGELOCATORS_WAIT_UNTIL") or "").strip().lower()
        return cls(
            url=(env.get("PAGELOCATORS_URL") or "").strip() or defaults.url,
            page_source_path=(base / PAGE_SOURCE_FILENAME) if base else defaults.page_source_path,
            locators_path=(base / LOCATORS_FILENAME) if base else defaults.locators_path,
            headless=_parse_bool(env.get("PAGELOCATORS_HEADLESS"), defaults.headless),
            navigation_timeout_ms=_parse_positive_int(
                env.get("PAGELOCATORS_TIMEOUT_MS"), defaults.navigation_timeout_ms
            ),
            wait_until=wait_until if wait_until in _WAIT_UNTIL_VALUES else defaults.wait_until,
            echo_page_source=_parse_bool(env.get("PAGELOCATORS_ECHO"), defaults.echo_page_source),
        )


def _parse_bool(raw: str | None, default: bool) -> bool:
    value = (raw or "").strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    return default


def _parse_positive_int(raw: str | None, default: int) -> int:
    try:
        parsed = int(str(raw).strip())
    except (TypeError, ValueError):
        return default
    return parsed if parsed > 0 else default
