"""Placement settings bundled as an immutable value."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Sequence

from .core.validation import validate_limits, validate_separation
from .placement import place, place_with_limits

_KEY_ALIASES = {
    "separation": "separation",
    "min_position": "min_position",
    "minPosition": "min_position",
    "max_position": "max_position",
    "maxPosition": "max_position",
}


@dataclass(frozen=True)
class PlacementConfig:
    """Minimum separation plus optional inclusive position limits.

    Limits are all-or-nothing: give both ``min_position`` and
    ``max_position``, or neither.
    """

    separation: int
    min_position: int | None = None
    max_position: int | None = None

    def __post_init__(self) -> None:
        # Store plain ints so to_dict() stays JSON-serializable.
        object.__setattr__(self, "separation", validate_separation(self.separation))
        if (self.min_position is None) != (self.max_position is None):
            raise ValueError(
                "min_position and max_position must be given together, "
                f"got min_position={self.min_position}, max_position={self.max_position}."
            )
        if self.bounded:
            min_position, max_position = validate_limits(
                self.min_position, self.max_position,
            )
            object.__setattr__(self, "min_position", min_position)
            object.__setattr__(self, "max_position", max_position)

    @property
    def bounded(self) -> bool:
        return self.min_position is not None

    def place(self, positions: Sequence[int]) -> list[int]:
        """Place labels with these settings."""
        if self.bounded:
            return place_with_limits(
                positions, self.separation, self.min_position, self.max_position,
            )
        return place(positions, self.separation)

    @classmethod
    def from_dict(cls, settings: Mapping[str, Any]) -> PlacementConfig:
        """Build a config from snake_case or camelCase keys."""
        unknown = [k for k in settings if k not in _KEY_ALIASES]
        if unknown:
            raise ValueError(
                f"Unknown placement settings: {unknown}. "
                f"Valid keys: {sorted(_KEY_ALIASES)}"
            )
        kwargs: dict[str, Any] = {}
        for key, value in settings.items():
            field_name = _KEY_ALIASES[key]
            if field_name in kwargs:
                raise ValueError(
                    f"Placement setting '{field_name}' given more than once "
                    f"(as '{key}' and an alias). Use one spelling."
                )
            kwargs[field_name] = value
        if "separation" not in kwargs:
            raise ValueError("Placement settings must include 'separation'.")
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Serialize for JSON transfer."""
        d: dict = {"separation": self.separation}
        if self.bounded:
            d["minPosition"] = self.min_position
            d["maxPosition"] = self.max_position
        return d
