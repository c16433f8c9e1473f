#!/usr/bin/env python
import os
import re

from setuptools import find_packages, setup


def get_version():
    path = os.path.join(os.path.dirname(__file__), "src", "layerblend", "version.py")
    with open(path) as f:
        return re.search(r'__version__ = "([^"]+)"', f.read()).group(1)


setup(
    name="layerblend",
    version=get_version(),
    description="Floating-point RGBA layers and source-over alpha compositing",
    license="MIT",
    python_requires=">=3.9",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "attrs>=23.1.0",
        "numpy",
        "Pillow>=10.3.0",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
