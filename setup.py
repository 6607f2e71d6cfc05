from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


def _read_version() -> str:
    """Read `__version__` from the package without importing it (no deps at build time)."""

    init_py = ROOT / "src" / "ouiserve" / "__init__.py"
    for line in init_py.read_text(encoding="utf-8").splitlines():
        if line.startswith("__version__"):
            return line.split("=", 1)[1].strip().strip("\"'")
    raise RuntimeError("Unable to find __version__ in src/ouiserve/__init__.py")


setup(
    name="ouiserve",
    version=_read_version(),
    description="Small HTTP service that maps IEEE OUI prefixes and MAC addresses to vendor names",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
    install_requires=[
        "fastapi",
        "uvicorn",
        "httpx",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "ouiserve=ouiserve.__main__:main",
        ],
    },
)
