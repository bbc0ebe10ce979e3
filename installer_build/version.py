"""
Semantic version parsing and encoding for the compiler's numeric version

The compiler only accepts versions made of four unsigned 16-bit fields. The
major, minor and patch numbers pass through unchanged. The fourth (build)
field carries the first two pre-release identifiers, one per byte:

    build = (byte(pre[0]) << 8) | byte(pre[1])

Numeric identifiers occupy [0, 229] of a byte and alphanumeric identifiers,
keyed by their first letter, occupy [230, 255]. A version without a
pre-release gets 65535 so that a release sorts after its pre-releases.
"""

import re
from typing import Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .errors import InvalidIdentifierError, InvalidVersionError, VersionOverflowError


LETTER_BASE: int = 255 - 26 + 1
"""Byte value of the letter 'a'/'A'"""
MAX_NUMERIC: int = LETTER_BASE - 1
"""Largest numeric identifier that fits below the letters"""
RELEASE_BUILD: int = 0xFFFF
"""Build field for a version without a pre-release"""
FIELD_MAX: int = 0xFFFF

_NUMERIC = r"0|[1-9]\d*"
_PRE_IDENTIFIER = r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
_SEMVER_RE = re.compile(
    rf"^(?P<major>{_NUMERIC})\.(?P<minor>{_NUMERIC})\.(?P<patch>{_NUMERIC})"
    rf"(?:-(?P<pre>{_PRE_IDENTIFIER}(?:\.{_PRE_IDENTIFIER})*))?"
    r"(?:\+(?P<build>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)


class NumericIdentifier(BaseModel):
    """A pre-release identifier made only of digits"""
    model_config = ConfigDict(frozen=True)

    value: int = Field(ge=0)

    def __str__(self) -> str:
        return str(self.value)


class AlphanumericIdentifier(BaseModel):
    """A pre-release identifier containing at least one non-digit"""
    model_config = ConfigDict(frozen=True)

    value: str

    def __str__(self) -> str:
        return self.value


Identifier = Union[NumericIdentifier, AlphanumericIdentifier]


class SemanticVersion(BaseModel):
    """A parsed semantic version; build metadata is kept but never encoded"""
    model_config = ConfigDict(frozen=True)

    major: int = Field(ge=0)
    minor: int = Field(ge=0)
    patch: int = Field(ge=0)
    pre: Tuple[Identifier, ...] = ()
    build: Tuple[str, ...] = ()

    @classmethod
    def parse(cls, text: str) -> "SemanticVersion":
        """
        Parse a semantic version string

        Args:
            text: Version in Major.Minor.Patch[-pre][+build] notation

        Returns:
            SemanticVersion instance
        """
        match = _SEMVER_RE.match(text.strip())
        if not match:
            raise InvalidVersionError(text)

        pre = ()
        if match.group("pre"):
            pre = tuple(_identifier(part) for part in match.group("pre").split("."))

        build = ()
        if match.group("build"):
            build = tuple(match.group("build").split("."))

        return cls(
            major=int(match.group("major")),
            minor=int(match.group("minor")),
            patch=int(match.group("patch")),
            pre=pre,
            build=build,
        )

    @property
    def is_prerelease(self) -> bool:
        return bool(self.pre)

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.pre:
            text += "-" + ".".join(str(identifier) for identifier in self.pre)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


def _identifier(part: str) -> Identifier:
    if part.isdigit():
        return NumericIdentifier(value=int(part))
    return AlphanumericIdentifier(value=part)


def identifier_byte(identifier: Identifier) -> int:
    """
    Map one pre-release identifier onto a byte of the build field

    Args:
        identifier: Numeric or alphanumeric identifier

    Returns:
        Value in [0, 255]
    """
    if isinstance(identifier, NumericIdentifier):
        if identifier.value > MAX_NUMERIC:
            raise VersionOverflowError(identifier.value, MAX_NUMERIC)
        return identifier.value

    text = identifier.value
    if not text:
        raise InvalidIdentifierError(text)
    first = text[0]
    if "a" <= first <= "z":
        return ord(first) - ord("a") + LETTER_BASE
    if "A" <= first <= "Z":
        return ord(first) - ord("A") + LETTER_BASE
    raise InvalidIdentifierError(text)


def build_field(pre: Tuple[Identifier, ...]) -> int:
    """
    Compute the build field from the pre-release identifiers

    Identifiers after the second are ignored.
    """
    if not pre:
        return RELEASE_BUILD

    value = identifier_byte(pre[0]) << 8
    if len(pre) >= 2:
        value |= identifier_byte(pre[1])
    return value


def encode_version(version: Union[SemanticVersion, str]) -> str:
    """
    Encode a semantic version as the compiler's four-field version

    Args:
        version: Parsed version, or text to parse

    Returns:
        "major.minor.patch.build" string
    """
    if isinstance(version, str):
        version = SemanticVersion.parse(version)

    for name in ("major", "minor", "patch"):
        value = getattr(version, name)
        if value > FIELD_MAX:
            raise VersionOverflowError(value, FIELD_MAX)

    build = build_field(version.pre)
    return f"{version.major}.{version.minor}.{version.patch}.{build}"


class VersionEncoder:
    """Encodes semantic versions for the compiler"""

    def encode(self, version: Union[SemanticVersion, str]) -> str:
        return encode_version(version)


__all__ = [
    "NumericIdentifier",
    "AlphanumericIdentifier",
    "Identifier",
    "SemanticVersion",
    "VersionEncoder",
    "encode_version",
    "build_field",
    "identifier_byte",
    "LETTER_BASE",
    "MAX_NUMERIC",
    "RELEASE_BUILD",
]
