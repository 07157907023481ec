"""Coupling histories of spins leading to total-spin eigenstates."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from spinner.direct_sum import Multiplicity, MultiplicityDirectSum
from spinner.order_of_summation import OrderOfSummation
from spinner.representations_multiplier import RepresentationsMultiplier


@dataclass(frozen=True, order=True)
class Properties:
    """Final multiplicity and representations of a coupled state."""

    multiplicity: Multiplicity
    representations: tuple[int, ...]


class SSquaredState:
    """Initial multiplicities plus the intermediate ones of a coupling scheme."""

    def __init__(
        self,
        initial_multiplicities: Sequence[Multiplicity],
        number_of_summations: int,
        number_of_representations: int = 0,
    ) -> None:
        self._initial = tuple(initial_multiplicities)
        self._intermediate: list[Multiplicity] = [0] * number_of_summations
        self._representations: list[tuple[int | None, ...]] = [
            (None,) * number_of_representations for _ in range(len(self))
        ]

    def _clone(self) -> SSquaredState:
        other = SSquaredState.__new__(SSquaredState)
        other._initial = self._initial
        other._intermediate = list(self._intermediate)
        other._representations = list(self._representations)
        return other

    def _check(self, number: int) -> None:
        if number < 0 or number >= len(self):
            raise IndexError(f"position {number} is out of range")

    def multiplicity(self, number: int) -> Multiplicity:
        """Multiplicity at a position (initial or intermediate)."""
        self._check(number)
        if number < len(self._initial):
            return self._initial[number]
        return self._intermediate[number - len(self._initial)]

    def set_multiplicity(self, number: int, multiplicity: Multiplicity) -> None:
        """Set an intermediate multiplicity once."""
        if 0 <= number < len(self._initial):
            raise ValueError("Cannot set initial multiplicity")
        self._check(number)
        position = number - len(self._initial)
        if self._intermediate[position] != 0:
            raise ValueError("Position was already set")
        self._intermediate[position] = multiplicity

    def representations(self, number: int) -> tuple[int | None, ...]:
        """Representations (one per group) at a position."""
        self._check(number)
        return self._representations[number]

    def set_representations(self, number: int, representations: Sequence[int | None]) -> None:
        """Replace the representations at a position."""
        self._check(number)
        self._representations[number] = tuple(representations)

    def __len__(self) -> int:
        return len(self._initial) + len(self._intermediate)

    def back(self) -> Properties:
        """Properties of the final sum."""
        if not self._intermediate:
            raise IndexError("state has no intermediate multiplicities")
        representations = self._representations[-1]
        if any(r is None for r in representations):
            raise ValueError("representation of the final sum is not set")
        return Properties(self._intermediate[-1], tuple(representations))  # type: ignore[arg-type]

    def __repr__(self) -> str:
        return (
            f"SSquaredState(initial={list(self._initial)!r}, "
            f"intermediate={self._intermediate!r})"
        )


def add_all_multiplicities_and_sort(
    multiplicities_to_sum: Sequence[Multiplicity],
    order_of_summation: OrderOfSummation,
    representations_multiplier: RepresentationsMultiplier,
) -> dict[Properties, list[SSquaredState]]:
    """Enumerate all coupling histories, grouped by final properties in sorted order."""
    histories = [
        SSquaredState(
            multiplicities_to_sum,
            len(order_of_summation),
            representations_multiplier.number_of_representations,
        )
    ]

    for instruction in order_of_summation:
        if len(instruction.positions_of_summands) != 2:
            raise ValueError("only summation of exactly two spins is supported")
        pos_one, pos_two = instruction.positions_of_summands
        pos_sum = instruction.position_of_sum
        next_histories = []
        for history in histories:
            mult_one = history.multiplicity(pos_one)
            mult_two = history.multiplicity(pos_two)
            for mult_sum in MultiplicityDirectSum(mult_one) * MultiplicityDirectSum(mult_two):
                representations_sum = representations_multiplier.multiply_representations(
                    history.representations(pos_one),
                    history.representations(pos_two),
                    instruction.number_of_group,
                    mult_one,
                    mult_two,
                    mult_sum,
                )
                state = history._clone()
                state.set_multiplicity(pos_sum, mult_sum)
                state.set_representations(pos_sum, representations_sum)
                next_histories.append(state)
        histories = next_histories

    grouped: dict[Properties, list[SSquaredState]] = {}
    for history in histories:
        grouped.setdefault(history.back(), []).append(history)
    return {key: grouped[key] for key in sorted(grouped)}