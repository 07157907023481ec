"""Direct sums of spin multiplicities and their Clebsch-Gordan products."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

Multiplicity = int


class MultiplicityDirectSum:
    """An unordered collection of multiplicities (2S + 1) forming a direct sum."""

    def __init__(self, *args: Multiplicity | Iterable[Multiplicity]) -> None:
        if not args:
            self._multiplicities: list[Multiplicity] = []
        elif len(args) == 1 and isinstance(args[0], int):
            self._multiplicities = [args[0]]
        elif len(args) == 1:
            self._multiplicities = [int(m) for m in args[0]]  # type: ignore[union-attr]
        else:
            self._multiplicities = [int(m) for m in args]  # type: ignore[arg-type]

    @property
    def multiplicities(self) -> tuple[Multiplicity, ...]:
        """The multiplicities in their stored order."""
        return tuple(self._multiplicities)

    def __add__(self, other: MultiplicityDirectSum) -> MultiplicityDirectSum:
        if not isinstance(other, MultiplicityDirectSum):
            return NotImplemented
        return MultiplicityDirectSum(self._multiplicities + other._multiplicities)

    def __iadd__(self, other: MultiplicityDirectSum) -> MultiplicityDirectSum:
        if not isinstance(other, MultiplicityDirectSum):
            return NotImplemented
        self._multiplicities.extend(other._multiplicities)
        return self

    @staticmethod
    def _product(
        left: Iterable[Multiplicity], right: Iterable[Multiplicity]
    ) -> list[Multiplicity]:
        right = list(right)
        result: list[Multiplicity] = []
        for a in left:
            for b in right:
                low, high = min(a, b), max(a, b)
                result.extend(range(high - low + 1, high + low, 2))
        return result

    def __mul__(self, other: MultiplicityDirectSum) -> MultiplicityDirectSum:
        if not isinstance(other, MultiplicityDirectSum):
            return NotImplemented
        return MultiplicityDirectSum(
            self._product(self._multiplicities, other._multiplicities)
        )

    def __imul__(self, other: MultiplicityDirectSum) -> MultiplicityDirectSum:
        if not isinstance(other, MultiplicityDirectSum):
            return NotImplemented
        self._multiplicities = self._product(self._multiplicities, other._multiplicities)
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MultiplicityDirectSum):
            return NotImplemented
        return sorted(self._multiplicities) == sorted(other._multiplicities)

    def __hash__(self) -> int:
        return hash(tuple(sorted(self._multiplicities)))

    def __iter__(self) -> Iterator[Multiplicity]:
        return iter(tuple(self._multiplicities))

    def __len__(self) -> int:
        return len(self._multiplicities)

    def __repr__(self) -> str:
        return f"MultiplicityDirectSum({self._multiplicities!r})"