import pytest

from installer_build.config import ToolchainConfig
from installer_build.errors import InvalidCultureError, InvalidValueError
from installer_build.platform import Platform, PlatformDetector


def test_packaged_defaults(toolchain_config):
    assert toolchain_config.manifest_file_name == "Cargo.toml"
    assert toolchain_config.metadata_table == ("package", "metadata", "wix")
    assert toolchain_config.default_culture == "en-US"
    assert toolchain_config.extension("source") == ".wxs"
    assert toolchain_config.extension("object") == ".wixobj"
    assert toolchain_config.tool("compiler") == "candle"
    assert toolchain_config.tool("linker") == "light"
    assert "MIT" in toolchain_config.get_license_ids()


@pytest.mark.parametrize("value, expected", [
    ("en-US", "en-US"),
    ("en-us", "en-US"),
    ("  FR-FR ", "fr-FR"),
    ("sr-latn-cs", "sr-Latn-CS"),
    ("ZH-tw", "zh-TW"),
])
def test_parse_culture(toolchain_config, value, expected):
    assert toolchain_config.parse_culture(value) == expected


@pytest.mark.parametrize("value", ["", "english", "en_US", "xx-XX"])
def test_parse_unknown_culture(toolchain_config, value):
    with pytest.raises(InvalidCultureError):
        toolchain_config.parse_culture(value)


def test_invalid_culture_is_invalid_value(toolchain_config):
    with pytest.raises(InvalidValueError):
        toolchain_config.parse_culture("nope")


def test_default_culture_is_known(toolchain_config):
    assert toolchain_config.default_culture in toolchain_config.get_cultures()


def test_unknown_extension(toolchain_config):
    with pytest.raises(ValueError):
        toolchain_config.extension("archive")


def test_missing_config_dir(tmp_path):
    with pytest.raises(FileNotFoundError):
        ToolchainConfig(tmp_path)


def test_custom_config_dir(tmp_path):
    (tmp_path / "toolchain.yaml").write_text(
        "defaults:\n  culture: fr-FR\nmanifest:\n  file_name: Project.toml\n"
    )
    (tmp_path / "cultures.yaml").write_text("cultures:\n  fr-FR: French (France)\n")

    config = ToolchainConfig(tmp_path)

    assert config.default_culture == "fr-FR"
    assert config.manifest_file_name == "Project.toml"
    with pytest.raises(InvalidCultureError):
        config.parse_culture("en-US")


def test_platform_arch():
    assert str(Platform.X64) == "x64"
    assert str(Platform.X86) == "x86"
    assert Platform.X64.arch == "x86_64"
    assert Platform.X86.arch == "i686"


def test_platform_follows_pointer_size(monkeypatch):
    import installer_build.platform as platform_module

    monkeypatch.setattr(platform_module.sys, "maxsize", 2**31 - 1)
    assert PlatformDetector().detect() is Platform.X86

    monkeypatch.setattr(platform_module.sys, "maxsize", 2**63 - 1)
    assert PlatformDetector().detect() is Platform.X64
