"""Holds exceptions raised while resolving an installer build"""

from pathlib import Path
from typing import Optional, Union


class InstallerBuildError(Exception):
    """Base class for every resolution failure"""


class MissingFieldError(InstallerBuildError):
    """Raised when a required field has no value in any source"""
    def __init__(self, field: str):
        self.field = field
        super().__init__(
            f"The '{field}' field is missing from the package's manifest. "
            f"Please add it or supply it explicitly."
        )


class InvalidValueError(InstallerBuildError):
    """Raised when a supplied value is malformed"""


class InvalidCultureError(InvalidValueError):
    """Raised when a culture string is not a recognized culture"""
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Unknown culture: '{value}'")


class InvalidVersionError(InvalidValueError):
    """Raised when a version string is not a valid semantic version"""
    def __init__(self, value: str, reason: Optional[str] = None):
        self.value = value
        message = f"Invalid semantic version: '{value}'"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class VersionOverflowError(InstallerBuildError):
    """Raised when a numeric pre-release identifier does not fit the build field"""
    def __init__(self, value: int, maximum: int):
        self.value = value
        self.maximum = maximum
        super().__init__(
            f"The pre-release value ({value}) exceeds the maximum allowed "
            f"value ({maximum}) for a build number."
        )


class InvalidIdentifierError(InstallerBuildError):
    """Raised when an alphanumeric pre-release identifier does not start with a letter"""
    def __init__(self, identifier: str):
        self.identifier = identifier
        if identifier:
            message = (f"The first character of the pre-release identifier "
                       f"'{identifier}' must be a letter (a-z or A-Z).")
        else:
            message = "The pre-release identifier is empty."
        super().__init__(message)


class NotFoundError(InstallerBuildError):
    """Raised when a path that must exist does not"""
    def __init__(self, path: Union[str, Path], origin: str = "path"):
        self.path = Path(path)
        self.origin = origin
        super().__init__(f"The {origin} '{path}' does not exist.")


class NotAFileError(InstallerBuildError):
    """Raised when a path that must be a file is a directory"""
    def __init__(self, path: Union[str, Path], origin: str = "path"):
        self.path = Path(path)
        self.origin = origin
        super().__init__(f"The {origin} '{path}' is a directory, expected a file.")


class NoSourceFilesError(InstallerBuildError):
    """Raised when discovery finds nothing to pass to the toolchain"""
    def __init__(self, directory: Union[str, Path], extension: str):
        self.directory = Path(directory)
        self.extension = extension
        super().__init__(f"No '{extension}' files found for '{directory}'.")


__all__ = [
    "InstallerBuildError",
    "MissingFieldError",
    "InvalidValueError",
    "InvalidCultureError",
    "InvalidVersionError",
    "VersionOverflowError",
    "InvalidIdentifierError",
    "NotFoundError",
    "NotAFileError",
    "NoSourceFilesError",
]
