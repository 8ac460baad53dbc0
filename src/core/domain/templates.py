"""Dependency templates per setup kind.

The tables are static and read-only: `manifest_lines` hands out a fresh
tuple so callers can never mutate the mapping.
"""

from __future__ import annotations

from types import MappingProxyType

from core.domain.models import SetupKind

_BASIC: tuple[str, ...] = (
    "numpy",
    "pandas",
    "matplotlib",
    "requests",
    "python-dotenv",
)

_ADVANCED: tuple[str, ...] = (
    "numpy",
    "pandas",
    "matplotlib",
    "seaborn",
    "scipy",
    "scikit-learn",
    "requests",
    "python-dotenv",
    "pydantic",
    "rich",
    "pytest",
    "ruff",
)

_DATA_SCIENCE: tuple[str, ...] = (
    "numpy",
    "pandas",
    "polars",
    "pyarrow",
    "scipy",
    "statsmodels",
    "scikit-learn",
    "matplotlib",
    "seaborn",
    "plotly",
    "jupyterlab",
    "ipykernel",
)

SETUP_TEMPLATES = MappingProxyType(
    {
        SetupKind.BASIC: _BASIC,
        SetupKind.ADVANCED: _ADVANCED,
        SetupKind.DATA_SCIENCE: _DATA_SCIENCE,
        SetupKind.BLANK: (),
    }
)


def manifest_lines(kind: SetupKind) -> tuple[str, ...]:
    return tuple(SETUP_TEMPLATES[kind])


def render_manifest(kind: SetupKind) -> str:
    """One package per line, trailing newline; empty string for `blank`."""

    lines = manifest_lines(kind)
    if not lines:
        return ""
    return "\n".join(lines) + "\n"
