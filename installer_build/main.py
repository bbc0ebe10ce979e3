"""
Entry point for resolving an installer build
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import ToolchainConfig
from .errors import InstallerBuildError
from .manifest import ProjectManifest
from .platform import Platform, PlatformDetector
from .resolver import Configuration, RawOverrides, Resolver
from .sources import SourceDiscovery
from .toolchain import CommandBuilder, ToolchainLocator
from .utils import Logger


class InstallerBuild:
    """Resolves the parameters of one installer build"""

    def __init__(self,
                 overrides: Optional[RawOverrides] = None,
                 manifest: Optional[ProjectManifest] = None,
                 config_dir: Optional[Path] = None,
                 platform: Optional[Platform] = None,
                 env: Optional[Dict[str, str]] = None,
                 verbose: bool = False,
                 log_file: Optional[str] = None):
        """
        Initialize the installer build

        Args:
            overrides: Explicit overrides from the calling layer
            manifest: Already loaded manifest; read from disk when omitted
            config_dir: Directory holding toolchain.yaml and cultures.yaml
            platform: Target platform (detected when omitted)
            env: Environment used to locate the toolchain
            verbose: Enable verbose output
            log_file: Optional log file path
        """
        self.overrides = overrides or RawOverrides()
        self.logger = Logger(verbose=verbose, log_file=log_file)
        self.config = ToolchainConfig(config_dir)
        self.platform = platform or PlatformDetector().detect()
        self.env = env
        self.resolver = Resolver(
            overrides=self.overrides,
            manifest=manifest,
            config=self.config,
            platform=self.platform,
            logger=self.logger,
        )
        self._configuration: Optional[Configuration] = None

    @property
    def configuration(self) -> Configuration:
        if self._configuration is None:
            self._configuration = self.resolve()
        return self._configuration

    def resolve(self) -> Configuration:
        """
        Resolve every build parameter

        Returns:
            Immutable Configuration
        """
        self.logger.info(f"Platform: {self.platform} ({self.platform.arch})")
        try:
            configuration = self.resolver.resolve()
            encoded = configuration.encoded_version
        except InstallerBuildError as e:
            self.logger.error(str(e))
            raise
        self.logger.success(
            f"Resolved {configuration.name} {configuration.version} "
            f"(candle version {encoded})"
        )
        self._configuration = configuration
        return configuration

    def command_builder(self) -> CommandBuilder:
        configuration = self.configuration
        locator = ToolchainLocator(
            self.config, configuration.bin_path, env=self.env, logger=self.logger
        )
        return CommandBuilder(configuration, self.config, locator, self.logger)

    def object_files(self) -> List[Path]:
        """
        Find the object files written by the compiler step

        Returns:
            Non-empty list of object files
        """
        discovery = SourceDiscovery(logger=self.logger)
        return discovery.object_files(
            self.configuration.object_dir, self.config.extension("object")
        )

    def commands(self) -> Dict[str, Any]:
        """
        Build the argument vectors for the build and compile steps

        The link step depends on the compiler's output, see link_command.
        """
        builder = self.command_builder()
        return {
            "build": builder.build_command(),
            "compile": builder.compiler_command(),
        }

    def link_command(self) -> List[str]:
        return self.command_builder().linker_command(self.object_files())

    def show_info(self) -> None:
        """Show the resolved build parameters"""
        from . import __version__

        c = self.configuration
        self.logger.raw(f"\nInstaller Build v{__version__}")
        self.logger.raw(f"{'='*50}")
        self.logger.raw(f"Manifest:  {c.manifest_path}")
        self.logger.raw(f"Product:   {c.name} {c.version}")
        self.logger.raw(f"Version:   {c.encoded_version}")
        self.logger.raw(f"Platform:  {c.platform} ({c.platform.arch})")
        self.logger.raw(f"Profile:   {c.profile}")
        self.logger.raw(f"Culture:   {c.culture}")
        self.logger.raw(f"Output:    {c.output}")
        self.logger.raw(f"\nSources ({len(c.sources)}):")
        for source in c.sources:
            self.logger.raw(f"  - {source}")
