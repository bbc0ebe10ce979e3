import logging

import pytest

from installer_build import InstallerBuild, RawOverrides
from installer_build.errors import MissingFieldError, NoSourceFilesError, VersionOverflowError
from installer_build.platform import Platform
from installer_build.resolver import Resolver
from installer_build.utils import Logger


def _make_build(project, **overrides) -> InstallerBuild:
    return InstallerBuild(
        RawOverrides(input=str(project), **overrides),
        platform=Platform.X64,
        env={},
    )


def test_resolve_and_commands(make_project):
    project = make_project()
    build = _make_build(project)

    configuration = build.resolve()
    commands = build.commands()

    assert configuration.name == "hello"
    assert commands["build"][:3] == ["cargo", "build", "--release"]
    assert commands["compile"][0] == "candle"
    assert "-dVersion=1.2.3.65535" in commands["compile"]
    assert commands["compile"][-1] == str(project / "wix" / "main.wxs")


def test_configuration_is_resolved_once(make_project):
    build = _make_build(make_project())
    assert build.configuration is build.configuration


def test_link_command_needs_object_files(make_project):
    project = make_project()
    build = _make_build(project)

    with pytest.raises(NoSourceFilesError):
        build.link_command()

    object_dir = project / "target" / "wix"
    object_dir.mkdir(parents=True)
    (object_dir / "main.wixobj").write_text("")

    command = build.link_command()
    assert command[0] == "light"
    assert command[-1] == str(object_dir / "main.wixobj")
    assert "-cultures:en-US" in command


def test_resolution_failure_is_logged(make_project, caplog):
    project = make_project("""
    [package]
    version = "1.0.0"
    """)
    build = _make_build(project)

    with caplog.at_level(logging.ERROR, logger="installer_build"):
        with pytest.raises(MissingFieldError):
            build.resolve()

    assert any("'name' field" in record.getMessage() for record in caplog.records)


def test_show_info(make_project, capsys):
    build = _make_build(make_project(), culture="it-IT")
    build.show_info()
    out = capsys.readouterr().out
    assert "hello 1.2.3" in out
    assert "it-IT" in out


def test_version_overflow_is_logged_and_not_cached(make_project, caplog):
    build = _make_build(make_project(), version="1.2.3-230")

    with caplog.at_level(logging.ERROR, logger="installer_build"):
        with pytest.raises(VersionOverflowError):
            build.resolve()

    assert any(record.levelno == logging.ERROR for record in caplog.records)
    assert build._configuration is None
    with pytest.raises(VersionOverflowError):
        build.configuration


def test_components_keep_the_build_log_handlers(make_project, tmp_path):
    project = make_project()
    log_file = tmp_path / "build.log"
    build = InstallerBuild(
        RawOverrides(input=str(project)),
        platform=Platform.X64,
        env={},
        verbose=True,
        log_file=str(log_file),
    )

    Resolver(RawOverrides(input=str(project)), platform=Platform.X64).resolve()
    build.resolve()

    for handler in logging.getLogger(Logger.NAME).handlers:
        handler.flush()
    assert "Resolved hello 1.2.3" in log_file.read_text()


def test_new_logger_closes_previous_handlers(tmp_path):
    Logger(log_file=str(tmp_path / "first.log"))
    file_handler = next(
        handler for handler in logging.getLogger(Logger.NAME).handlers
        if isinstance(handler, logging.FileHandler)
    )

    Logger()

    assert file_handler not in logging.getLogger(Logger.NAME).handlers
    assert file_handler.stream is None
