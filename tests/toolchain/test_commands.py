import os
from pathlib import Path

import pytest

from installer_build.errors import NotFoundError
from installer_build.platform import Platform
from installer_build.resolver import Configuration
from installer_build.toolchain import CommandBuilder, ToolchainLocator
from installer_build.version import SemanticVersion


def _make_configuration(**changes) -> Configuration:
    values = dict(
        manifest_path=Path("project") / "Cargo.toml",
        name="hello",
        version=SemanticVersion.parse("1.2.3-beta.1"),
        culture="en-US",
        sources=(Path("project") / "wix" / "main.wxs",),
        output=Path("project") / "target" / "wix" / "hello-1.2.3-beta.1-x86_64.msi",
        object_dir=Path("project") / "target" / "wix",
        platform=Platform.X64,
    )
    values.update(changes)
    return Configuration(**values)


def _builder(configuration, toolchain_config, env=None):
    locator = ToolchainLocator(toolchain_config, configuration.bin_path, env=env or {})
    return CommandBuilder(configuration, toolchain_config, locator)


def test_locator_uses_path_lookup(toolchain_config):
    locator = ToolchainLocator(toolchain_config, env={})
    assert locator.compiler() == "candle"
    assert locator.linker() == "light"


def test_locator_uses_bin_path(toolchain_config, tmp_path):
    (tmp_path / "candle.exe").write_text("")
    locator = ToolchainLocator(toolchain_config, tmp_path, env={"WIX": "ignored"})
    assert locator.compiler() == str(tmp_path / "candle.exe")
    with pytest.raises(NotFoundError):
        locator.linker()


def test_locator_uses_environment(toolchain_config, tmp_path):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    (bin_dir / "light.exe").write_text("")
    locator = ToolchainLocator(toolchain_config, env={"WIX": str(tmp_path)})
    assert locator.linker() == str(bin_dir / "light.exe")
    with pytest.raises(NotFoundError):
        locator.compiler()


def test_build_command(toolchain_config):
    builder = _builder(_make_configuration(), toolchain_config)
    assert builder.build_command() == [
        "cargo", "build", "--release",
        "--manifest-path", str(Path("project") / "Cargo.toml"),
    ]


def test_build_command_debug(toolchain_config):
    builder = _builder(_make_configuration(debug_build=True), toolchain_config)
    assert "--release" not in builder.build_command()


def test_build_command_skipped(toolchain_config):
    builder = _builder(_make_configuration(no_build=True), toolchain_config)
    assert builder.build_command() is None


def test_compiler_command(toolchain_config):
    configuration = _make_configuration(compiler_args=("-nologo",))
    command = _builder(configuration, toolchain_config).compiler_command()
    assert command == [
        "candle",
        "-dProfile=release",
        "-dVersion=1.2.3.59137",
        "-dPlatform=x64",
        "-ext", "WixUtilExtension",
        "-o", str(Path("project") / "target" / "wix") + os.sep,
        "-nologo",
        str(Path("project") / "wix" / "main.wxs"),
    ]


def test_linker_command(toolchain_config):
    configuration = _make_configuration(
        locale=Path("project") / "wix" / "main.wxl",
        culture="fr-FR",
        linker_args=("-sval",),
        debug_build=True,
    )
    objects = [Path("project") / "target" / "wix" / "main.wixobj"]
    command = _builder(configuration, toolchain_config).linker_command(objects)
    assert command == [
        "light",
        "-loc", str(Path("project") / "wix" / "main.wxl"),
        "-spdb",
        "-ext", "WixUIExtension",
        "-ext", "WixUtilExtension",
        "-cultures:fr-FR",
        "-out", str(configuration.output),
        "-b", "project",
        "-sval",
        str(objects[0]),
    ]


def test_linker_command_without_locale(toolchain_config):
    command = _builder(_make_configuration(), toolchain_config).linker_command([])
    assert "-loc" not in command
    assert command[1] == "-spdb"
