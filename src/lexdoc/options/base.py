#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Base classes for normalizer and renderer options.

This module defines the foundation classes for the configuration objects
used throughout the lexdoc pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from lexdoc.constants import DEFAULT_MAX_DEPTH
from lexdoc.exceptions import ValidationError


def _validate_max_depth(value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        raise ValidationError(
            f"max_depth must be a positive integer, got {value!r}",
            parameter_name="max_depth",
            parameter_value=value,
        )


@dataclass(frozen=True)
class CloneFrozenMixin:
    """Mixin providing frozen dataclass cloning capabilities."""

    def create_updated(self, **kwargs: Any) -> Self:
        """Create a new instance with updated field values.

        Parameters
        ----------
        **kwargs : Any
            Field names and their new values

        Returns
        -------
        Self
            New instance with specified fields updated

        """
        return replace(self, **kwargs)


@dataclass(frozen=True)
class NormalizeOptions(CloneFrozenMixin):
    """Options controlling how raw editor values are normalized.

    Parameters
    ----------
    max_depth : int, default 200
        Maximum nesting depth followed while unwrapping legacy shapes and
        building the typed tree. Deeper subtrees are dropped and a warning
        is logged.

    """

    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum document nesting depth", "type": int},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges.

        Raises
        ------
        ValidationError
            If max_depth is not a positive integer.

        """
        _validate_max_depth(self.max_depth)


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Parameters
    ----------
    max_depth : int, default 200
        Maximum nesting depth the renderer descends into. Deeper nodes are
        skipped so hand-built trees cannot exhaust the call stack.

    """

    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={"help": "Maximum rendering depth", "type": int, "exclude_from_cli": True},
    )

    def __post_init__(self) -> None:
        """Validate numeric ranges for base renderer options.

        Raises
        ------
        ValidationError
            If max_depth is not a positive integer.

        """
        _validate_max_depth(self.max_depth)
