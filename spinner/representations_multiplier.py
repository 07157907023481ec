"""Products of irreducible representations under spin coupling."""

from __future__ import annotations

from collections.abc import Mapping, Sequence, Set

from spinner.direct_sum import Multiplicity

CayleyTable = Mapping[tuple[int, int], Set[int]]


class RepresentationsMultiplier:
    """Combines the representations of two coupled spins, one per group."""

    def __init__(self, cayley_tables: Sequence[CayleyTable] = ()) -> None:
        self._cayley_tables = list(cayley_tables)

    @property
    def number_of_representations(self) -> int:
        """Number of groups whose representations are tracked."""
        return len(self._cayley_tables)

    def multiply_representations(
        self,
        representations_one: Sequence[int | None],
        representations_two: Sequence[int | None],
        number_of_group: int | None,
        mult_one: Multiplicity,
        mult_two: Multiplicity,
        mult_sum: Multiplicity,
    ) -> list[int]:
        """Representation of the sum for every group."""
        result = []
        for group, (one, two) in enumerate(zip(representations_one, representations_two)):
            if group != number_of_group:
                result.append(self._outside_orbit(self._cayley_tables[group], one, two))
            else:
                result.append(self._inside_orbit(mult_one, mult_two, mult_sum))
        return result

    @staticmethod
    def _outside_orbit(table: CayleyTable, one: int | None, two: int | None) -> int:
        if one is not None and two is not None:
            return min(table[(one, two)])
        if one is not None:
            return one
        if two is not None:
            return two
        return 0  # the totally symmetric representation

    @staticmethod
    def _inside_orbit(
        mult_one: Multiplicity, mult_two: Multiplicity, mult_sum: Multiplicity
    ) -> int:
        # Valid for the two-element permutation group only.
        if mult_one == mult_two:
            max_multiplicity = mult_one + mult_two - 1
            return 0 if (max_multiplicity - mult_sum) % 4 == 0 else 1
        return 0 if mult_one > mult_two else 1