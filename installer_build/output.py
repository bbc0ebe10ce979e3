"""
Resolution of the installer's destination path
"""

import logging
import os
from pathlib import Path
from typing import Any, Optional, Union

from .platform import Platform
from .version import SemanticVersion


def installer_file_name(name: str,
                        version: Union[SemanticVersion, str],
                        platform: Platform,
                        debug_name: bool = False,
                        extension: str = "msi") -> str:
    """
    Build the default installer file name

    Returns:
        "{name}-{version}-{arch}[-debug].{extension}"
    """
    extension = extension.lstrip(".")
    stem = f"{name}-{version}-{platform.arch}"
    if debug_name:
        stem += "-debug"
    return f"{stem}.{extension}"


def names_directory(path_str: str) -> bool:
    """Whether a path string should be treated as a destination directory"""
    return path_str.endswith(("/", "\\")) or Path(path_str).is_dir()


class OutputPathResolver:
    """Computes where the linker writes the installer"""

    def __init__(self, default_dir: Union[str, Path], logger: Optional[Any] = None):
        """
        Initialize output path resolver

        Args:
            default_dir: Build output folder beside the project manifest
            logger: Logger instance
        """
        self.default_dir = Path(default_dir)
        self.logger = logger or logging.getLogger("installer_build")

    def resolve(self,
                file_name: str,
                override: Optional[str] = None,
                metadata: Optional[str] = None) -> Path:
        """
        Resolve the installer path

        The explicit override wins over the manifest value, which wins over
        the default folder. A path ending in a separator or naming an
        existing directory receives the default file name; any other path
        is used as given.

        Args:
            file_name: Default installer file name
            override: Explicitly supplied output path
            metadata: Output path from the package's manifest

        Returns:
            Installer path
        """
        if override is not None:
            self.logger.debug("Using the explicitly specified output path for the installer")
            return self._apply(override, file_name)
        if metadata is not None:
            self.logger.debug("Using the output path in the package's manifest for the installer")
            return self._apply(metadata, file_name)
        self.logger.debug("Using the default build output folder for the installer")
        return self.default_dir / file_name

    def _apply(self, path_str: str, file_name: str) -> Path:
        if names_directory(path_str):
            if os.sep == "/":
                # "dist\" names the folder "dist", not a folder called "dist\"
                path_str = path_str.rstrip("\\") or path_str
            return Path(path_str) / file_name
        return Path(path_str)


__all__ = ["OutputPathResolver", "installer_file_name", "names_directory"]
