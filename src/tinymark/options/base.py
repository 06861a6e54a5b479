"""Base classes for parser and renderer options.

This module defines the foundation classes for the option dataclasses used
throughout the tinymark conversion pipeline.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, fields, replace
from typing import Any

if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

# Annotations are strings under postponed evaluation
_FIELD_TYPES: dict[str, type] = {"bool": bool, "str": str}


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

    @classmethod
    def from_mapping(cls, values: dict[str, Any]) -> Self:
        """Build options from a mapping, ignoring keys that are not fields.

        Used to apply configuration-file sections, which may carry keys meant
        for other components.
        """
        names = {option_field.name for option_field in fields(cls)}  # type: ignore[arg-type]
        return cls(**{key: value for key, value in values.items() if key in names})

    def _validate_field_types(self) -> None:
        """Check that bool and str fields hold values of that type.

        Configuration files can carry quoted values such as ``"false"``, which
        would otherwise be stored as a truthy string.

        Raises
        ------
        TypeError
            If a field holds a value of the wrong type

        """
        for option_field in fields(self):  # type: ignore[arg-type]
            expected = _FIELD_TYPES.get(str(option_field.type))
            value = getattr(self, option_field.name)
            if expected is not None and not isinstance(value, expected):
                raise TypeError(
                    f"{option_field.name} must be a {expected.__name__}, got {type(value).__name__} {value!r}"
                )


@dataclass(frozen=True)
class BaseRendererOptions(CloneFrozenMixin):
    """Base class for all renderer options.

    Notes
    -----
    Subclasses should define format-specific rendering options as frozen
    dataclass fields.

    """


@dataclass(frozen=True)
class BaseParserOptions(CloneFrozenMixin):
    """Base class for all parser options.

    Notes
    -----
    Subclasses should define format-specific parsing options as frozen
    dataclass fields.

    """
