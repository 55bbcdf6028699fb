#!/usr/bin/env python3
import setuptools

setuptools.setup(
    name="py-import-helper",
    version="0.1.0",
    packages=["py_import_helper"],
    python_requires=">=3.11",
    install_requires=[
        "click>=8.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "pyimports = py_import_helper.cli:main",
        ],
    },
    author="",
    description="Organize Python import statements into PEP 8 groups for code generators",
    license="MIT",
)
