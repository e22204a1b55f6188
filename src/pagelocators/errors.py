from __future__ import annotations


class PageLocatorsError(Exception):
    """Base error for failures that abort a locator run."""


class BrowserUnavailableError(PageLocatorsError):
    """Raised when the managed browser cannot be launched or reached."""


class PageLoadError(PageLocatorsError):
    """Raised when navigation to the target page fails."""
