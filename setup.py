"""
Setup script for the installer build

Resolves the parameters for building a platform installer with the
candle (compiler) and light (linker) toolchain from a project's manifest.
"""

from pathlib import Path
from setuptools import setup, find_packages


# Read README for long description
readme_path = Path("README.md")
long_description = ""
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as f:
        long_description = f.read()

setup(
    name="installer-build",
    version="1.0.0",
    description="Configuration resolution and version encoding for installer builds",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(include=["installer_build", "installer_build.*"]),
    package_data={
        "installer_build": [
            "config/*.yaml",
        ]
    },
    include_package_data=True,
    zip_safe=False,
    python_requires=">=3.10",
    install_requires=[
        "pydantic>=2",
        "pyyaml",
        "tomli",
    ],
    extras_require={
        "test": [
            "pytest",
        ],
        "dev": [
            "pytest",
            "pytest-cov",
            "black",
            "flake8",
            "mypy",
        ]
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: Microsoft :: Windows",
        "Operating System :: POSIX :: Linux",
        "Topic :: Software Development :: Build Tools",
    ],
)
