"""
Platform detection for the installer build
"""

import sys
from enum import Enum


class Platform(Enum):
    """Target platform of the installer"""

    X86 = "x86"
    X64 = "x64"

    def __str__(self) -> str:
        return self.value

    @property
    def arch(self) -> str:
        """Architecture name used in installer file names"""
        if self is Platform.X64:
            return "x86_64"
        return "i686"


class PlatformDetector:
    """Detects the installer platform from the build environment"""

    def detect(self) -> Platform:
        """
        Detect the installer platform

        The interpreter's pointer size decides, not platform.machine():
        a 32-bit interpreter on a 64-bit OS builds x86 installers.

        Returns:
            Platform.X64 or Platform.X86
        """
        python_bits = 64 if sys.maxsize > 2**32 else 32
        if python_bits == 64:
            return Platform.X64
        return Platform.X86


__all__ = ["Platform", "PlatformDetector"]
