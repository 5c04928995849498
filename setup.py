#!/usr/bin/env python3
"""Setup script for RisuAI Inspector."""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

setup(
    name="risu-inspector",
    version="0.1.0",
    author="RisuAI Inspector contributors",
    description="Decode RisuAI module (.risum) and preset (.risup) containers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["server"],
    package_data={
        "risu_inspector_py": ["config.json"],
    },
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Utilities",
    ],
    python_requires=">=3.8",
    install_requires=[
        "msgpack>=1.0",
        "cryptography>=3.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "pytest-cov>=4.0",
            "mypy>=1.0",
            "flask>=2.0",
        ],
        "server": [
            "flask>=2.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "risu-inspector=risu_inspector_py.cli:main",
        ],
    },
)
