#!/usr/bin/env python
from setuptools import setup, find_packages

setup(
    name="ssl-ai-core",
    version="0.0.1",
    description="SSL AI decision core: predictive world model and robot primitives",
    author="UnBall",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=["protobuf>=3.20.3", "numpy"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["ssl-ai-core=main:main"]},
)
