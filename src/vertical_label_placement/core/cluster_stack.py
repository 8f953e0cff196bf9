"""ClusterStack: stack-like access to the clusters placed so far."""

from __future__ import annotations

from .cluster import Cluster


class ClusterStack:
    """Clusters ordered by position, each already separated from the next.

    Because adjacent clusters always respect the separation, only the top
    of the stack ever needs to be checked against a new cluster.
    """

    def __init__(self, separation: int) -> None:
        self._separation = separation
        self._clusters: list[Cluster] = []

    def __len__(self) -> int:
        return len(self._clusters)

    def pop_if_not_separate(self, cluster: Cluster) -> Cluster | None:
        """Pop and return the top cluster if it is too close to ``cluster``.

        Returns None, leaving the stack untouched, when the top cluster is
        sufficiently separated or the stack is empty.
        """
        if not self._clusters:
            return None
        if self._clusters[-1].end + self._separation > cluster.start:
            return self._clusters.pop()
        return None

    def push(self, cluster: Cluster) -> None:
        self._clusters.append(cluster)

    def positions(self) -> list[int]:
        """Flatten the clusters into one permitted position per label."""
        positions: list[int] = []
        for cluster in self._clusters:
            positions.extend(
                range(cluster.start, cluster.end + 1, self._separation)
            )
        return positions
