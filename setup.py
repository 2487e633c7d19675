"""
Setup script for PDF Generator CLI.

This script configures the package for installation via pip.
Supports both development and production installations.
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read the README for long description
this_directory = Path(__file__).parent
long_description = (this_directory / "README.md").read_text(encoding='utf-8')

setup(
    name="pdf-generator-cli",
    version="1.0.0",
    description="CLI tool for generating numbered PDF files padded to a target file size",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="PDF Generator CLI Contributors",
    author_email="",
    packages=find_packages(include=["pdf_generator", "pdf_generator.*"]),
    install_requires=[
        "reportlab>=4.0.0",
        "pypdf>=3.0.0",
        "click>=8.2.0",
        "rich>=13.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "pdf-generator=pdf_generator.cli:cli",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Development Status :: 5 - Production/Stable",
        "Intended Audience :: Developers",
        "Topic :: Software Development :: Testing",
        "Topic :: Utilities",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
        "Environment :: Console",
    ],
    keywords="pdf generate pages padding file-size test-fixtures cli",
    license="MIT",
    include_package_data=True,
    zip_safe=False,
)
