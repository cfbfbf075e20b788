"""Terminal interaction for the scan flow."""

from .prompts import (
    ChainedParameterSource,
    InteractiveParameterSource,
    ParameterSource,
    StaticParameterSource,
)

__all__ = [
    "ChainedParameterSource",
    "InteractiveParameterSource",
    "ParameterSource",
    "StaticParameterSource",
]
