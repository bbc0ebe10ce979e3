"""
Configuration management for the installer build
"""

import yaml
from pathlib import Path
from typing import Dict, List, Any, Optional, Tuple

from ..errors import InvalidCultureError


DEFAULT_CONFIG_DIR = Path(__file__).parent


class ToolchainConfig:
    """Loads and manages the toolchain and culture configuration"""

    def __init__(self, config_dir: Optional[Path] = None):
        """
        Initialize configuration loader

        Args:
            config_dir: Directory containing configuration files
        """
        self.config_dir = Path(config_dir) if config_dir else DEFAULT_CONFIG_DIR

        toolchain_file = self.config_dir / "toolchain.yaml"
        if not toolchain_file.exists():
            raise FileNotFoundError(f"Toolchain config not found: {toolchain_file}")

        with open(toolchain_file, 'r') as f:
            self.toolchain_config = yaml.safe_load(f) or {}

        cultures_file = self.config_dir / "cultures.yaml"
        if not cultures_file.exists():
            raise FileNotFoundError(f"Cultures config not found: {cultures_file}")

        with open(cultures_file, 'r') as f:
            self.cultures_config = yaml.safe_load(f) or {}

        # Lower-cased tag -> canonical tag
        self._culture_lookup = {
            tag.lower(): tag for tag in self.cultures_config.get("cultures", {})
        }

    def get(self, section: str, key: str, default: Any = None) -> Any:
        """
        Get a value from a section of the toolchain configuration

        Args:
            section: Section name (manifest, layout, extensions, ...)
            key: Key within the section
            default: Default value if not found

        Returns:
            Configured value
        """
        return self.toolchain_config.get(section, {}).get(key, default)

    @property
    def manifest_file_name(self) -> str:
        return self.get("manifest", "file_name", "Cargo.toml")

    @property
    def package_table(self) -> str:
        return self.get("manifest", "package_table", "package")

    @property
    def metadata_table(self) -> Tuple[str, ...]:
        return tuple(self.get("manifest", "metadata_table", ["package", "metadata", "wix"]))

    @property
    def default_culture(self) -> str:
        return self.get("defaults", "culture", "en-US")

    def extension(self, kind: str) -> str:
        """
        Get a file extension

        Args:
            kind: One of source, object, installer, executable

        Returns:
            The extension as configured (with or without the leading dot)
        """
        value = self.get("extensions", kind)
        if value is None:
            raise ValueError(f"Unknown extension kind: {kind}")
        return value

    def tool(self, key: str) -> Any:
        """Get a toolchain setting"""
        value = self.get("toolchain", key)
        if value is None:
            raise ValueError(f"Unknown toolchain setting: {key}")
        return value

    def layout(self, key: str) -> str:
        """Get a project layout folder name"""
        value = self.get("layout", key)
        if value is None:
            raise ValueError(f"Unknown layout setting: {key}")
        return value

    def get_license_ids(self) -> List[str]:
        """Get license ids that have a bundled rich-text template"""
        return list(self.get("licenses", "ids", []))

    def get_cultures(self) -> Dict[str, str]:
        """Get all known cultures, keyed by canonical tag"""
        return dict(self.cultures_config.get("cultures", {}))

    def parse_culture(self, value: str) -> str:
        """
        Match a culture string against the known cultures

        Args:
            value: Culture tag, in any letter case

        Returns:
            The canonical culture tag
        """
        canonical = self._culture_lookup.get(value.strip().lower())
        if canonical is None:
            raise InvalidCultureError(value)
        return canonical


__all__ = ["ToolchainConfig", "DEFAULT_CONFIG_DIR"]
