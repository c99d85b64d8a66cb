#!/usr/bin/env python
"""The setup script."""
import os
import re

from setuptools import find_packages, setup


def get_version():
    """Get current version from code."""
    regex = r"__version__\s=\s\"(?P<version>[\d\.]+?)\""
    path = ("src", "lifx_cloud", "__version__.py")
    return re.search(regex, read(*path)).group("version")


def read(*parts):
    """Read file."""
    filename = os.path.join(os.path.abspath(os.path.dirname(__file__)), *parts)
    with open(filename, encoding="utf-8", mode="rt") as fp:
        return fp.read()


setup(
    author="LIFX Cloud contributors",
    classifiers=[
        "Development Status :: 4 - Beta",
        "Framework :: AsyncIO",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Natural Language :: English",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3",
        "Topic :: Home Automation",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],
    description="Asynchronous Python client for the LIFX cloud API.",
    extras_require={"test": ["pytest", "pytest-asyncio", "aresponses"]},
    include_package_data=True,
    install_requires=[
        "aiohttp>=3.0.0",
        "yarl",
        "backoff>=2.2.0",
        "orjson>=3.9.8",
        "mashumaro>=3.13",
    ],
    keywords=["lifx", "api", "async", "client"],
    license="MIT license",
    long_description_content_type="text/markdown",
    long_description=read("README.md"),
    name="lifx-cloud",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.11",
    test_suite="tests",
    version=get_version(),
    zip_safe=False,
)
