"""
Path validation and discovery of the files passed to the toolchain
"""

import logging
from pathlib import Path
from typing import Any, Iterable, List, Optional, Union

from .errors import NoSourceFilesError, NotAFileError, NotFoundError


class PathValidator:
    """Checks that resolved paths reference existing entities"""

    def require_file(self, path: Union[str, Path], origin: str = "file") -> Path:
        """
        Ensure a path exists and is not a directory

        Args:
            path: Path to check
            origin: Where the path came from, used in the failure message

        Returns:
            The path
        """
        path = Path(path)
        if not path.exists():
            raise NotFoundError(path, origin)
        if path.is_dir():
            raise NotAFileError(path, origin)
        return path

    def require_directory(self, path: Union[str, Path], origin: str = "directory") -> Path:
        """Ensure a path exists and is a directory"""
        path = Path(path)
        if not path.is_dir():
            raise NotFoundError(path, origin)
        return path


class SourceDiscovery:
    """Locates sets of input files for the compiler and linker"""

    def __init__(self,
                 validator: Optional[PathValidator] = None,
                 logger: Optional[Any] = None):
        """
        Initialize source discovery

        Args:
            validator: Path validator for explicitly listed files
            logger: Logger instance
        """
        self.validator = validator or PathValidator()
        self.logger = logger or logging.getLogger("installer_build")

    def discover(self, directory: Union[str, Path], extension: str) -> List[Path]:
        """
        List the files in a directory with a given extension

        Entries that cannot be read are skipped. A missing directory yields
        an empty list.

        Args:
            directory: Directory to scan (not recursive)
            extension: Required suffix, e.g. ".wxs"

        Returns:
            Sorted list of matching files
        """
        directory = Path(directory)
        if not extension.startswith("."):
            extension = f".{extension}"

        if not directory.is_dir():
            self.logger.debug(f"Source directory {directory} does not exist")
            return []

        found = []
        try:
            entries = list(directory.iterdir())
        except OSError as e:
            self.logger.debug(f"Could not list {directory}: {e}")
            return []

        for entry in entries:
            try:
                if entry.suffix == extension and entry.is_file():
                    found.append(entry)
            except OSError:
                continue

        return sorted(found)

    def installer_sources(self,
                          directory: Union[str, Path],
                          extension: str,
                          explicit: Optional[Iterable[Union[str, Path]]] = None,
                          origin: str = "source file") -> List[Path]:
        """
        Collect the installer source files

        Files found in the directory come first, followed by each explicitly
        listed file after it has been validated.

        Args:
            directory: Project source directory to scan
            extension: Source file extension
            explicit: Additional files from an override or the manifest
            origin: Description of where the explicit files came from

        Returns:
            Non-empty list of source files
        """
        sources = self.discover(directory, extension)
        for path in sources:
            self.logger.debug(f"Using the '{path}' source file")

        for entry in explicit or []:
            path = self.validator.require_file(entry, origin)
            self.logger.debug(f"Using the '{path}' {origin}")
            sources.append(path)

        if not sources:
            raise NoSourceFilesError(directory, extension)
        return sources

    def object_files(self, directory: Union[str, Path], extension: str) -> List[Path]:
        """
        Collect compiled object files for the linker

        Args:
            directory: Compiler output directory
            extension: Object file extension

        Returns:
            Non-empty list of object files
        """
        objects = self.discover(directory, extension)
        if not objects:
            raise NoSourceFilesError(directory, extension)
        return objects


__all__ = ["PathValidator", "SourceDiscovery"]
