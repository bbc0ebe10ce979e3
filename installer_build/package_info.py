"""Help URL and license details taken from the package table"""

from pathlib import Path
from typing import Iterable, Optional

from pydantic import BaseModel, ConfigDict

from .manifest import ProjectManifest


HELP_URL_FIELDS = ("documentation", "homepage", "repository")


class PackageInfo(BaseModel):
    """Descriptive package details shown by the installer"""
    model_config = ConfigDict(frozen=True)

    help_url: Optional[str] = None
    license_name: Optional[str] = None
    license_source: Optional[str] = None


def help_url(manifest: ProjectManifest) -> Optional[str]:
    """First of documentation, homepage and repository that is set"""
    for field in HELP_URL_FIELDS:
        url = manifest.package(field)
        if url is not None:
            return url
    return None


def resolve_package_info(manifest: ProjectManifest,
                         license_ids: Iterable[str],
                         license_file_name: str = "License",
                         license_extension: str = "rtf") -> PackageInfo:
    """
    Resolve the help URL and license details

    A license id with a bundled template maps to the generated license file.
    Otherwise the manifest's license-file is used, with its source only kept
    when the file exists.

    Args:
        manifest: Project manifest
        license_ids: License ids that have a bundled template
        license_file_name: Stem of the generated license file
        license_extension: Extension of the generated license file

    Returns:
        PackageInfo instance
    """
    license_name = None
    license_source = None

    license_id = manifest.package("license")
    license_file = manifest.package("license-file")
    if license_id is not None and license_id in set(license_ids):
        license_name = license_file_name
        license_source = f"{license_file_name}.{license_extension}"
    elif license_file is not None:
        license_name = Path(license_file).name
        if Path(license_file).exists():
            license_source = license_file

    return PackageInfo(
        help_url=help_url(manifest),
        license_name=license_name,
        license_source=license_source,
    )


__all__ = ["PackageInfo", "help_url", "resolve_package_info"]
