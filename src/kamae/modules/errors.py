"""Error types raised by the kamae core."""

from pathlib import Path
from typing import Union


class KamaeError(Exception):
    """Base class for all kamae errors."""


class ManifestLoadError(KamaeError):
    """The application manifest is missing, unreadable or malformed."""

    def __init__(self, path: Union[str, Path], reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: {reason}")


class EmptyCatalogError(KamaeError):
    """The manifest parsed but yielded no applications."""

    def __init__(self, message: str = "No applications found in manifest"):
        super().__init__(message)


class UnknownMechanismError(KamaeError):
    """An application declares an install mechanism nobody knows how to run."""

    def __init__(self, app_id: str, install: str):
        self.app_id = app_id
        self.install = install
        super().__init__(f"Unknown install mechanism '{install}' for application '{app_id}'")


class SessionNotFinishedError(KamaeError):
    """The final selection was requested before a confirm or quit event."""
