"""Packaging for streamchat-sdk."""

from setuptools import find_packages, setup

setup(
    name="streamchat-sdk",
    version="0.1.0",
    description="Async Python client for a hosted chat backend's query, search and moderation APIs",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "httpx>=0.27",
        "pydantic>=2.6",
    ],
    extras_require={
        "test": [
            "pytest>=8",
            "pytest-asyncio>=0.23",
        ],
    },
)
