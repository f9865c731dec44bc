from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _long_description() -> str:
    readme = ROOT / "README.md"
    return readme.read_text(encoding="utf-8") if readme.exists() else ""


setup(
    name="medreg",
    version="0.1.0",
    description="In-memory medication registry served over HTTP",
    long_description=_long_description(),
    long_description_content_type="text/markdown",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    install_requires=[
        "fastapi>=0.100",
        "uvicorn>=0.29",
        "httpx>=0.24",
    ],
    extras_require={
        "test": [
            "pytest>=7",
        ],
    },
    entry_points={
        "console_scripts": [
            "medreg=medreg.__main__:main",
        ],
    },
)
