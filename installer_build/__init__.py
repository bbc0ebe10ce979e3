"""
Installer Build
Resolves build parameters for the candle/light installer toolchain
"""

__version__ = "1.0.0"

from .errors import (
    InstallerBuildError,
    MissingFieldError,
    InvalidValueError,
    InvalidCultureError,
    InvalidVersionError,
    VersionOverflowError,
    InvalidIdentifierError,
    NotFoundError,
    NotAFileError,
    NoSourceFilesError,
)
from .main import InstallerBuild
from .manifest import ProjectManifest
from .platform import Platform
from .resolver import Configuration, RawOverrides, Resolver, resolve_configuration
from .version import SemanticVersion, VersionEncoder, encode_version

__all__ = [
    "__version__",
    "InstallerBuild",
    "ProjectManifest",
    "Platform",
    "Configuration",
    "RawOverrides",
    "Resolver",
    "resolve_configuration",
    "SemanticVersion",
    "VersionEncoder",
    "encode_version",
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
