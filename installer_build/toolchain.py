"""
Toolchain location and command-line construction

Nothing here runs a process. The argument vectors are handed to whatever
layer executes the build, compile and link steps.
"""

import logging
import os
from pathlib import Path
from typing import Any, List, Mapping, Optional, Sequence, Union

from .config import ToolchainConfig
from .errors import NotFoundError
from .resolver import Configuration


class ToolchainLocator:
    """Finds the compiler and linker executables"""

    def __init__(self,
                 config: ToolchainConfig,
                 bin_path: Optional[Union[str, Path]] = None,
                 env: Optional[Mapping[str, str]] = None,
                 logger: Optional[Any] = None):
        """
        Initialize toolchain locator

        Args:
            config: Toolchain configuration
            bin_path: Explicit folder holding the executables
            env: Environment variables (defaults to os.environ)
            logger: Logger instance
        """
        self.config = config
        self.bin_path = Path(bin_path) if bin_path is not None else None
        self.env = os.environ if env is None else env
        self.logger = logger or logging.getLogger("installer_build")

    def _executable(self, folder: Path, tool: str) -> Path:
        return folder / f"{tool}.{self.config.extension('executable')}"

    def find(self, tool: str) -> str:
        """
        Locate a toolchain executable

        The explicit bin folder is tried first, then the bin folder under
        the toolchain's environment variable. Without either, the bare
        tool name is returned for lookup on PATH.

        Args:
            tool: Tool name without extension (candle, light)

        Returns:
            Path or name of the executable
        """
        if self.bin_path is not None:
            path = self._executable(self.bin_path, tool)
            self.logger.debug(f"Using the '{self.bin_path}' folder for '{tool}'")
            if not path.exists():
                raise NotFoundError(path, f"'{tool}' application from the bin path")
            return str(path)

        env_key = self.config.tool("path_env")
        root = self.env.get(env_key)
        if root:
            folder = Path(root) / self.config.tool("binary_folder")
            path = self._executable(folder, tool)
            self.logger.debug(f"Using the {env_key} environment variable for '{tool}'")
            if not path.exists():
                raise NotFoundError(path, f"'{tool}' application from the {env_key} environment variable")
            return str(path)

        return tool

    def compiler(self) -> str:
        return self.find(self.config.tool("compiler"))

    def linker(self) -> str:
        return self.find(self.config.tool("linker"))


class CommandBuilder:
    """Builds argument vectors for the build, compile and link steps"""

    def __init__(self,
                 configuration: Configuration,
                 config: Optional[ToolchainConfig] = None,
                 locator: Optional[ToolchainLocator] = None,
                 logger: Optional[Any] = None):
        """
        Initialize command builder

        Args:
            configuration: Resolved build parameters
            config: Toolchain configuration
            locator: Toolchain locator; built from the configuration's bin path when omitted
            logger: Logger instance
        """
        self.configuration = configuration
        self.config = config or ToolchainConfig()
        self.logger = logger or logging.getLogger("installer_build")
        self.locator = locator or ToolchainLocator(
            self.config, configuration.bin_path, logger=self.logger
        )

    def build_command(self) -> Optional[List[str]]:
        """
        Command that builds the project binary

        Returns:
            Argument vector, or None when building is skipped
        """
        if self.configuration.no_build:
            self.logger.warning("Skipped building the release binary")
            return None

        command = [self.config.tool("builder"), "build"]
        if not self.configuration.debug_build:
            command.append("--release")
        command.extend(["--manifest-path", str(self.configuration.manifest_path)])
        return command

    def compiler_command(self) -> List[str]:
        """Command that compiles the installer sources into object files"""
        c = self.configuration
        command = [
            self.locator.compiler(),
            f"-dProfile={c.profile}",
            f"-dVersion={c.encoded_version}",
            f"-dPlatform={c.platform}",
        ]
        for extension in self.config.tool("compiler_extensions"):
            command.extend(["-ext", extension])
        # Trailing separator makes the compiler treat -o as a folder
        command.extend(["-o", os.path.join(str(c.object_dir), "")])
        command.extend(c.compiler_args)
        command.extend(str(source) for source in c.sources)
        return command

    def linker_command(self, object_files: Sequence[Union[str, Path]]) -> List[str]:
        """
        Command that links object files into the installer

        Args:
            object_files: Files produced by the compiler

        Returns:
            Argument vector
        """
        c = self.configuration
        command = [self.locator.linker()]
        if c.locale is not None:
            command.extend(["-loc", str(c.locale)])
        command.append("-spdb")
        for extension in self.config.tool("linker_extensions"):
            command.extend(["-ext", extension])
        command.extend([
            f"-cultures:{c.culture}",
            "-out", str(c.output),
            "-b", str(c.project_dir),
        ])
        command.extend(c.linker_args)
        command.extend(str(path) for path in object_files)
        return command


__all__ = ["ToolchainLocator", "CommandBuilder"]
