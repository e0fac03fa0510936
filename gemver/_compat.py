"""Shims for interpreters older than 3.11."""

import sys

if sys.version_info >= (3, 11):
    from enum import StrEnum
else:
    from backports.strenum import StrEnum  # type: ignore[import-not-found, no-redef]

__all__ = ["StrEnum"]
