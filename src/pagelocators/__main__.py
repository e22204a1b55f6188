from __future__ import annotations

import logging
import os
import sys

from .runtime_checks import python_version_error

EXIT_OK = 0
EXIT_EXPORT_FAILED = 1
EXIT_ENVIRONMENT_FAILED = 2


def _configure_logging() -> None:
    level_name = os.environ.get("PAGELOCATORS_LOG_LEVEL", "INFO").strip().upper()
    level = getattr(logging, level_name, None)
    logging.basicConfig(
        level=level if isinstance(level, int) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main() -> int:
    version_error = python_version_error()
    if version_error:
        raise SystemExit(version_error)
    _configure_logging()
    try:
        from .config import RunConfig
        from .errors import PageLocatorsError
        from .pipeline import run
    except ModuleNotFoundError as exc:
        if exc.name and exc.name.split(".")[0] in {"playwright", "bs4", "openpyxl"}:
            raise SystemExit(
                f"{exc.name} is not installed in this interpreter. "
                "Activate the project venv and run `pip install -e .`."
            ) from exc
        raise

    config = RunConfig.from_env()
    print(f"[pagelocators] url={config.url}")
    try:
        result = run(config)
    except PageLocatorsError as exc:
        logging.getLogger("pagelocators").error("Run aborted: %s", exc)
        return EXIT_ENVIRONMENT_FAILED

    print(f"[pagelocators] elements={result.element_count} locators={len(result.records)}")
    print(f"[pagelocators] page_source={config.page_source_path} written={result.page_source_written}")
    print(f"[pagelocators] locators={config.locators_path} written={result.locators_written}")
    return EXIT_OK if result.ok else EXIT_EXPORT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
