"""Label layout: pair placed positions with label text for rendering."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np
import pandas as pd

from ..config import PlacementConfig
from ..core.validation import validate_positions


@dataclass(frozen=True)
class LabelSpec:
    """A single label to render."""

    text: str
    preferred: int   # where the label would ideally sit
    position: int    # where it is permitted to sit

    @property
    def offset(self) -> int:
        return self.position - self.preferred


class LabelLayoutEngine:
    """Computes permitted label positions for one vertical axis.

    Labels keep their input order; the caller supplies them sorted by
    preferred position.
    """

    @staticmethod
    def compute(
        ids: np.ndarray | list,
        preferred: np.ndarray | list,
        config: PlacementConfig,
    ) -> list[LabelSpec]:
        """Compute label specs for an axis.

        Parameters
        ----------
        ids : array of label IDs, in the same order as ``preferred``
        preferred : non-decreasing integer preferred positions
        config : separation and optional limits
        """
        ids = list(ids)
        preferred_values = validate_positions(preferred)
        if len(ids) != len(preferred_values):
            raise ValueError(
                f"Got {len(ids)} label IDs but {len(preferred_values)} "
                "preferred positions. Provide one position per label."
            )

        permitted = config.place(preferred_values)
        return [
            LabelSpec(text=str(label_id), preferred=pref, position=pos)
            for label_id, pref, pos in zip(ids, preferred_values, permitted)
        ]

    @staticmethod
    def from_series(series: pd.Series, config: PlacementConfig) -> pd.Series:
        """Place a Series of preferred positions indexed by label.

        Returns a new Series of permitted positions with the same index
        and name.
        """
        if not isinstance(series, pd.Series):
            raise TypeError(
                f"Expected a pandas Series, got {type(series).__name__}."
            )
        permitted = config.place(series.to_numpy())
        return pd.Series(
            np.asarray(permitted, dtype=np.int64),
            index=series.index.copy(),
            name=series.name,
        )

    @staticmethod
    def max_offset(labels: list[LabelSpec]) -> int:
        """Largest absolute distance of any label from its preferred position."""
        if not labels:
            return 0
        offsets = np.fromiter((label.offset for label in labels), dtype=np.int64)
        return int(np.abs(offsets).max())

    @staticmethod
    def serialize(labels: list[LabelSpec], font_size: float = 10.0) -> list[dict]:
        """Serialize label specs for JSON transfer.

        Parameters
        ----------
        labels : list[LabelSpec]
            Label specs to serialize
        font_size : float
            Font size in pixels (default 10.0)
        """
        return [
            {
                "text": label.text,
                "preferred": int(label.preferred),
                "position": int(label.position),
                "offset": int(label.offset),
                "fontSize": float(font_size),
            }
            for label in labels
        ]
