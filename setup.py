# -*- coding: utf-8 -*-

import os

from setuptools import find_packages, setup

extras_require = {
    "test": [
        "pytest>=6.2.5",
        "pytest-cov>=2.10",
        "pytest-instafail>=0.4",
        "pytest-xdist>=2.5",
        "hypothesis>=6.0",
    ],
    "lint": [
        "black==23.12.0",
        "flake8==6.1.0",
        "flake8-bugbear==23.12.2",
        "flake8-use-fstring==1.4",
        "isort==5.13.2",
        "mypy==1.5",
    ],
    "dev": ["ipython", "pre-commit", "twine"],
}

extras_require["dev"] = extras_require["test"] + extras_require["lint"] + extras_require["dev"]

with open("README.md", "r") as f:
    long_description = f.read()


# single source of truth for the version, also used as the fallback in
# intcast/__init__.py when the package metadata is not installed
def _read_version():
    version_file = os.path.join(os.path.dirname(__file__), "intcast", "version.py")
    namespace = {}
    with open(version_file) as f:
        exec(f.read(), namespace)
    return namespace["version"]


setup(
    name="intcast",
    version=_read_version(),
    description="Checked conversions between fixed-width and pointer-sized integer kinds",
    long_description=long_description,
    long_description_content_type="text/markdown",
    author="intcast developers",
    author_email="",
    license="Apache License 2.0",
    keywords="integer conversion overflow checked cast",
    include_package_data=True,
    packages=find_packages(include=["intcast", "intcast.*"]),
    python_requires=">=3.10,<4",
    install_requires=[],
    extras_require=extras_require,
    classifiers=[
        "Intended Audience :: Developers",
        "License :: OSI Approved :: Apache Software License",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
    ],
)
