"""Minimal version helper for the sccomponents package."""

from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

PACKAGE_NAME = "sccomponents"
FALLBACK_VERSION = "0.0.0"


def get_version() -> str:
    """
    Get version for the package.

    :return: Version number.
    """
    try:  # installed
        return version(PACKAGE_NAME)
    except PackageNotFoundError:  # source checkout
        import setuptools_scm  # type: ignore[import-untyped]

        root = Path(__file__).resolve().parents[2]
        return str(
            setuptools_scm.get_version(root=root, fallback_version=FALLBACK_VERSION)
        )


__all__ = ["get_version"]
