from pathlib import Path

from installer_build.output import OutputPathResolver, installer_file_name, names_directory
from installer_build.platform import Platform
from installer_build.version import SemanticVersion


FILE_NAME = "hello-1.2.3-x86_64.msi"


def test_installer_file_name():
    assert installer_file_name("hello", "1.2.3", Platform.X64) == FILE_NAME
    assert installer_file_name("hello", "1.2.3", Platform.X86, debug_name=True) == \
        "hello-1.2.3-i686-debug.msi"
    version = SemanticVersion.parse("0.1.0-rc.1+meta")
    assert installer_file_name("app", version, Platform.X64, extension=".msi") == \
        "app-0.1.0-rc.1+meta-x86_64.msi"


def test_default_location(tmp_path):
    resolver = OutputPathResolver(tmp_path / "target" / "wix")
    assert resolver.resolve(FILE_NAME) == tmp_path / "target" / "wix" / FILE_NAME


def test_override_with_trailing_separator(tmp_path):
    resolver = OutputPathResolver(tmp_path / "target")
    override = str(tmp_path / "new-dir") + "/"
    assert resolver.resolve(FILE_NAME, override=override) == tmp_path / "new-dir" / FILE_NAME


def test_override_naming_existing_directory(tmp_path):
    existing = tmp_path / "dist"
    existing.mkdir()
    resolver = OutputPathResolver(tmp_path / "target")
    assert resolver.resolve(FILE_NAME, override=str(existing)) == existing / FILE_NAME


def test_override_used_verbatim(tmp_path):
    resolver = OutputPathResolver(tmp_path / "target")
    override = str(tmp_path / "dist" / "installer")
    assert resolver.resolve(FILE_NAME, override=override) == Path(override)


def test_override_beats_metadata(tmp_path):
    resolver = OutputPathResolver(tmp_path / "target")
    result = resolver.resolve(FILE_NAME, override="a.msi", metadata="b.msi")
    assert result == Path("a.msi")


def test_metadata_path(tmp_path):
    resolver = OutputPathResolver(tmp_path / "target")
    assert resolver.resolve(FILE_NAME, metadata="out/") == Path("out") / FILE_NAME
    assert resolver.resolve(FILE_NAME, metadata="out/setup.msi") == Path("out/setup.msi")


def test_names_directory(tmp_path):
    assert names_directory("some/dir/")
    assert names_directory("some\\dir\\")
    assert names_directory(str(tmp_path))
    assert not names_directory(str(tmp_path / "missing"))


def test_override_with_trailing_backslash(tmp_path):
    resolver = OutputPathResolver(tmp_path / "target")
    override = str(tmp_path / "dist") + "\\"
    assert resolver.resolve(FILE_NAME, override=override) == tmp_path / "dist" / FILE_NAME
