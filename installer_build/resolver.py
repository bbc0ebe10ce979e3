"""
Resolution of the installer build parameters

Every parameter is taken from the first source that supplies it:

    1. the explicit override
    2. the packaging configuration table of the manifest
    3. the package table of the manifest (name and version only)
    4. the built-in default

Later sources are never consulted once a value is found.
"""

import logging
from pathlib import Path
from typing import Any, List, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict

from .config import ToolchainConfig
from .errors import MissingFieldError, NotFoundError
from .manifest import ProjectManifest
from .output import OutputPathResolver, installer_file_name
from .package_info import resolve_package_info
from .platform import Platform, PlatformDetector
from .sources import PathValidator, SourceDiscovery
from .version import SemanticVersion, encode_version


class RawOverrides(BaseModel):
    """Explicitly supplied values; None means not supplied"""
    model_config = ConfigDict(frozen=True)

    bin_path: Optional[str] = None
    """Folder holding the compiler and linker executables"""
    input: Optional[str] = None
    """Path to the package's manifest, or the folder containing it"""
    name: Optional[str] = None
    version: Optional[str] = None
    culture: Optional[str] = None
    locale: Optional[str] = None
    """Path to a localization file for the linker"""
    output: Optional[str] = None
    includes: Optional[Tuple[str, ...]] = None
    """Additional installer source files"""
    compiler_args: Optional[Tuple[str, ...]] = None
    linker_args: Optional[Tuple[str, ...]] = None
    debug_build: Optional[bool] = None
    debug_name: Optional[bool] = None
    no_build: Optional[bool] = None


class Configuration(BaseModel):
    """Fully resolved installer build parameters"""
    model_config = ConfigDict(frozen=True)

    manifest_path: Path
    name: str
    version: SemanticVersion
    culture: str
    locale: Optional[Path] = None
    sources: Tuple[Path, ...]
    compiler_args: Tuple[str, ...] = ()
    linker_args: Tuple[str, ...] = ()
    output: Path
    object_dir: Path
    platform: Platform
    debug_build: bool = False
    debug_name: bool = False
    no_build: bool = False
    bin_path: Optional[Path] = None
    help_url: Optional[str] = None
    license_name: Optional[str] = None
    license_source: Optional[str] = None

    @property
    def project_dir(self) -> Path:
        return self.manifest_path.parent

    @property
    def encoded_version(self) -> str:
        return encode_version(self.version)

    @property
    def profile(self) -> str:
        return "debug" if self.debug_build else "release"


class Resolver:
    """Applies the fixed precedence to every build parameter"""

    def __init__(self,
                 overrides: Optional[RawOverrides] = None,
                 manifest: Optional[ProjectManifest] = None,
                 config: Optional[ToolchainConfig] = None,
                 platform: Optional[Platform] = None,
                 logger: Optional[Any] = None):
        """
        Initialize resolver

        Args:
            overrides: Explicit overrides
            manifest: Already loaded manifest; loaded from disk when omitted
            config: Toolchain configuration
            platform: Target platform; detected from the interpreter when omitted
            logger: Logger instance
        """
        self.overrides = overrides or RawOverrides()
        self.config = config or ToolchainConfig()
        self.platform = platform or PlatformDetector().detect()
        self.logger = logger or logging.getLogger("installer_build")
        self.validator = PathValidator()
        self.discovery = SourceDiscovery(self.validator, self.logger)
        self._manifest = manifest

    def resolve(self) -> Configuration:
        """
        Resolve every parameter

        Returns:
            Immutable Configuration
        """
        manifest_path = self.manifest_path()
        self.logger.debug(f"manifest_path = {manifest_path}")
        manifest = self.manifest(manifest_path)

        name = self.name(manifest)
        self.logger.debug(f"name = {name}")
        version = self.version(manifest)
        encoded_version = encode_version(version)
        self.logger.debug(f"version = {version} (encoded {encoded_version})")
        culture = self.culture(manifest)
        self.logger.debug(f"culture = {culture}")
        locale = self.locale(manifest)
        self.logger.debug(f"locale = {locale}")
        compiler_args = self.compiler_args(manifest)
        self.logger.debug(f"compiler_args = {list(compiler_args)}")
        linker_args = self.linker_args(manifest)
        self.logger.debug(f"linker_args = {list(linker_args)}")
        debug_build = self.debug_build(manifest)
        self.logger.debug(f"debug_build = {debug_build}")
        debug_name = self.debug_name(manifest)
        self.logger.debug(f"debug_name = {debug_name}")
        no_build = self.no_build(manifest)
        self.logger.debug(f"no_build = {no_build}")
        bin_path = self.bin_path()
        self.logger.debug(f"bin_path = {bin_path}")

        project_dir = manifest_path.parent
        sources = self.sources(manifest, project_dir)
        self.logger.debug(f"sources = {[str(s) for s in sources]}")
        object_dir = self.object_dir(project_dir)
        self.logger.debug(f"object_dir = {object_dir}")
        output = self.output(manifest, project_dir, name, version, debug_name)
        self.logger.debug(f"output = {output}")

        info = resolve_package_info(
            manifest,
            self.config.get_license_ids(),
            self.config.get("licenses", "file_name", "License"),
            self.config.get("licenses", "file_extension", "rtf"),
        )
        self.logger.debug(f"package_info = {info}")

        return Configuration(
            manifest_path=manifest_path,
            name=name,
            version=version,
            culture=culture,
            locale=locale,
            sources=tuple(sources),
            compiler_args=compiler_args,
            linker_args=linker_args,
            output=output,
            object_dir=object_dir,
            platform=self.platform,
            debug_build=debug_build,
            debug_name=debug_name,
            no_build=no_build,
            bin_path=bin_path,
            help_url=info.help_url,
            license_name=info.license_name,
            license_source=info.license_source,
        )

    def manifest_path(self) -> Path:
        """
        Locate the package's manifest

        An explicit input may name the manifest or the folder containing
        it. Without one, an already loaded manifest keeps its own path and
        otherwise the manifest in the current working directory is used.
        """
        file_name = self.config.manifest_file_name
        if self.overrides.input is not None:
            path = Path(self.overrides.input)
            if path.is_dir():
                path = path / file_name
            if not path.exists():
                raise NotFoundError(path, "package manifest")
            return path
        if self._manifest is not None and self._manifest.path is not None:
            return self._manifest.path
        return Path(file_name)

    def manifest(self, manifest_path: Path) -> ProjectManifest:
        if self._manifest is None:
            self._manifest = ProjectManifest.load(
                manifest_path,
                metadata_table=self.config.metadata_table,
                package_table=self.config.package_table,
            )
        return self._manifest

    def name(self, manifest: ProjectManifest) -> str:
        if self.overrides.name is not None:
            return self.overrides.name
        metadata_name = manifest.metadata_string("name")
        if metadata_name is not None:
            return metadata_name
        package_name = manifest.package("name")
        if package_name is not None:
            return package_name
        raise MissingFieldError("name")

    def version(self, manifest: ProjectManifest) -> SemanticVersion:
        if self.overrides.version is not None:
            text = self.overrides.version
        else:
            text = manifest.metadata_string("version")
            if text is None:
                text = manifest.package("version")
            if text is None:
                raise MissingFieldError("version")
        return SemanticVersion.parse(text)

    def culture(self, manifest: ProjectManifest) -> str:
        if self.overrides.culture is not None:
            return self.config.parse_culture(self.overrides.culture)
        metadata_culture = manifest.metadata_string("culture")
        if metadata_culture is not None:
            return self.config.parse_culture(metadata_culture)
        return self.config.default_culture

    def locale(self, manifest: ProjectManifest) -> Optional[Path]:
        if self.overrides.locale is not None:
            return self.validator.require_file(self.overrides.locale, "localization file")
        metadata_locale = manifest.metadata_string("locale")
        if metadata_locale is not None:
            return self.validator.require_file(
                metadata_locale, "localization file from the package's manifest"
            )
        return None

    def compiler_args(self, manifest: ProjectManifest) -> Tuple[str, ...]:
        return self._arguments("compiler_args", "compiler-args", manifest)

    def linker_args(self, manifest: ProjectManifest) -> Tuple[str, ...]:
        return self._arguments("linker_args", "linker-args", manifest)

    def _arguments(self, field: str, key: str, manifest: ProjectManifest) -> Tuple[str, ...]:
        explicit = getattr(self.overrides, field)
        if explicit is not None:
            return tuple(explicit)
        metadata_args = manifest.metadata_strings(key)
        if metadata_args is not None:
            return tuple(metadata_args)
        return ()

    def debug_build(self, manifest: ProjectManifest) -> bool:
        return self._flag("debug_build", "dbg-build", manifest)

    def debug_name(self, manifest: ProjectManifest) -> bool:
        return self._flag("debug_name", "dbg-name", manifest)

    def no_build(self, manifest: ProjectManifest) -> bool:
        return self._flag("no_build", "no-build", manifest)

    def _flag(self, field: str, key: str, manifest: ProjectManifest) -> bool:
        explicit = getattr(self.overrides, field)
        if explicit is not None:
            return explicit
        metadata_flag = manifest.metadata_boolean(key)
        if metadata_flag is not None:
            return metadata_flag
        return False

    def bin_path(self) -> Optional[Path]:
        if self.overrides.bin_path is None:
            return None
        return self.validator.require_directory(self.overrides.bin_path, "toolchain bin folder")

    def sources(self, manifest: ProjectManifest, project_dir: Path) -> List[Path]:
        """
        Collect the installer source files

        The project's source folder is always scanned. Explicitly listed
        files are appended, taken from the override or else the manifest.
        """
        source_dir = project_dir / self.config.layout("source_dir")
        extension = self.config.extension("source")
        if self.overrides.includes is not None:
            return self.discovery.installer_sources(
                source_dir, extension, self.overrides.includes, "source file"
            )
        return self.discovery.installer_sources(
            source_dir,
            extension,
            manifest.metadata_strings("include"),
            "source file from the package's manifest",
        )

    def object_dir(self, project_dir: Path) -> Path:
        return project_dir / self.config.layout("target_dir") / self.config.layout("output_dir")

    def output(self,
               manifest: ProjectManifest,
               project_dir: Path,
               name: str,
               version: SemanticVersion,
               debug_name: bool) -> Path:
        file_name = installer_file_name(
            name, version, self.platform, debug_name, self.config.extension("installer")
        )
        resolver = OutputPathResolver(self.object_dir(project_dir), self.logger)
        if self.overrides.output is not None:
            return resolver.resolve(file_name, override=self.overrides.output)
        return resolver.resolve(file_name, metadata=manifest.metadata_string("output"))


def resolve_configuration(overrides: Optional[RawOverrides] = None,
                          manifest: Optional[Union[ProjectManifest, str, Path]] = None,
                          **kwargs) -> Configuration:
    """
    Resolve a Configuration in one call

    Args:
        overrides: Explicit overrides
        manifest: Loaded manifest, or path to the manifest file

    Returns:
        Immutable Configuration
    """
    if isinstance(manifest, (str, Path)):
        overrides = (overrides or RawOverrides()).model_copy(update={"input": str(manifest)})
        manifest = None
    return Resolver(overrides, manifest, **kwargs).resolve()


__all__ = ["RawOverrides", "Configuration", "Resolver", "resolve_configuration"]
