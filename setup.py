"""Setup script for bloodhound-cli."""

from setuptools import find_packages, setup

setup(
    name="bloodhound-cli",
    version="0.1.0",
    description="A command line interface for BloodHound Community Edition",
    python_requires=">=3.10",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "click>=8.1",
        "pydantic>=2.5",
        "pydantic-settings>=2.1",
        "dependency-injector>=4.41",
        "docker>=7.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "bloodhound-cli=bloodhound_cli.__main__:main",
        ],
    },
)
