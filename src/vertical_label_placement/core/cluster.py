"""Cluster: a run of neighbouring labels spaced exactly one separation apart."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Cluster:
    """A set of neighbouring labels whose permitted positions are separated
    by exactly the minimum separation.

    Offsets are measured as (permitted - preferred) over every member.
    Immutable: every operation returns a new Cluster.
    """

    start: int        # position of the first member
    end: int          # position of the last member
    min_offset: int
    max_offset: int

    @classmethod
    def from_position(cls, position: int) -> Cluster:
        """Create a cluster holding a single label at its preferred position."""
        return cls(start=position, end=position, min_offset=0, max_offset=0)

    @classmethod
    def merge(cls, first: Cluster, second: Cluster, separation: int) -> Cluster:
        """Merge two neighbouring clusters that are not sufficiently separated.

        ``first`` is moved so that it ends exactly one separation before
        ``second`` starts, then the combined cluster is balanced.
        """
        first = first.shift(second.start - first.end - separation)
        return cls(
            start=first.start,
            end=second.end,
            min_offset=min(first.min_offset, second.min_offset),
            max_offset=max(first.max_offset, second.max_offset),
        ).balance()

    @property
    def span(self) -> int:
        return self.end - self.start

    def shift(self, offset: int) -> Cluster:
        """Move the cluster, and every member offset, by ``offset``."""
        return replace(
            self,
            start=self.start + offset,
            end=self.end + offset,
            min_offset=self.min_offset + offset,
            max_offset=self.max_offset + offset,
        )

    def balance(self) -> Cluster:
        """Shift the cluster to centre its offset range on zero.

        This minimises the maximum absolute offset within the cluster. The
        halving truncates toward zero, so odd sums are resolved the same way
        for negative and positive imbalances.
        """
        total = self.min_offset + self.max_offset
        imbalance = abs(total) // 2
        if total < 0:
            imbalance = -imbalance
        if imbalance == 0:
            return self
        return self.shift(-imbalance)

    def limit(self, min_position: int, max_position: int) -> Cluster:
        """Shift the cluster to respect an inclusive position range.

        The maximum is applied last, so it wins when the cluster is wider
        than the range.
        """
        cluster = self
        if cluster.start < min_position:
            cluster = cluster.shift(min_position - cluster.start)
        if cluster.end > max_position:
            cluster = cluster.shift(max_position - cluster.end)
        return cluster
