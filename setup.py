#!/usr/bin/env python3

import setuptools

if __name__ == "__main__":
    setuptools.setup(
        name="chunkstore",
        version="0.1.0",
        description="Quota-bounded local storage for content-addressed chunks",
        python_requires=">=3.8",
        packages=setuptools.find_namespace_packages(include=["chunkstore", "chunkstore.*"]),
        install_requires=[
            "rich>=12.0.0",
            "typer>=0.9.0",
        ],
        extras_require={
            "test": ["pytest>=7.0.0"],
        },
        entry_points={
            "console_scripts": [
                "chunkstore=chunkstore.cli.cli:app",
            ]
        },
    )
