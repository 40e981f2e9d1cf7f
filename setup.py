import os
from setuptools import find_packages
from setuptools import setup


src_version = os.path.join(os.path.dirname(__file__), "advent", "version.py")
with open(src_version) as f:
    version = f.read().strip().split()[-1][1:-1]


setup(
    name="advent-runner",
    version=version,
    description="Run, time and scaffold your Advent of Code solutions",
    long_description=open("README.rst").read(),
    long_description_content_type="text/x-rst",
    packages=find_packages(include=["advent", "advent.*"]),
    entry_points={
        "console_scripts": [
            "advent=advent.runner:main",
        ],
        # https://setuptools.readthedocs.io/en/latest/setuptools.html#dynamic-discovery-of-services-and-plugins
        "advent.solutions": [],
    },
    license="MIT",
    classifiers=[
        "Intended Audience :: Developers",
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Topic :: Software Development :: Libraries",
        "Topic :: Games/Entertainment :: Puzzle Games",
    ],
    python_requires=">=3.10",
    install_requires=[
        "urllib3>=2",
        "termcolor",
        "pebble",
        'colorama; platform_system == "Windows"',
        'tzdata; platform_system == "Windows"',
    ],
    extras_require={
        "test": [
            "pytest",
            "pytest-mock",
            "pytest-freezer",
            "pook",
        ],
    },
)
