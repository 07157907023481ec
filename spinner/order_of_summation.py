"""The order in which spin multiplicities are coupled together."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence, Set
from dataclasses import dataclass


@dataclass(frozen=True)
class AdditionInstruction:
    """Couple the summands at the given positions into the position of the sum."""

    positions_of_summands: tuple[int, ...]
    position_of_sum: int
    number_of_group: int | None = None


class OrderOfSummation:
    """An ordered sequence of addition instructions."""

    def __init__(self, instructions: Iterable[AdditionInstruction]) -> None:
        self._instructions = tuple(instructions)

    @classmethod
    def construct_from_orbits(
        cls,
        all_groups_orbits_of_mults: Sequence[Sequence[Set[int]]],
        number_of_mults: int,
        number_of_summation: int,
    ) -> OrderOfSummation:
        """Build the order, summing symmetry orbits first and the rest pairwise."""
        size = max(number_of_mults + number_of_summation - 1, 0)
        parent: list[int | None] = [None] * size
        instructions: list[AdditionInstruction] = []

        def root(pos: int) -> int:
            while parent[pos] is not None:
                pos = parent[pos]  # type: ignore[assignment]
            return pos

        for number_of_group, orbits in enumerate(all_groups_orbits_of_mults):
            if len(instructions) == number_of_summation:
                break
            for orbit in orbits:
                if len(orbit) == 1:
                    continue
                summands = tuple(root(pos) for pos in sorted(orbit))
                if len(set(summands)) != len(summands):
                    continue
                position_of_sum = number_of_mults + len(instructions)
                for pos in summands:
                    parent[pos] = position_of_sum
                instructions.append(
                    AdditionInstruction(summands, position_of_sum, number_of_group)
                )
                if len(instructions) == number_of_summation:
                    break

        while len(instructions) < number_of_summation:
            position_of_sum = number_of_mults + len(instructions)
            free = [pos for pos, value in enumerate(parent) if value is None][:2]
            for pos in free:
                parent[pos] = position_of_sum
            instructions.append(AdditionInstruction(tuple(free), position_of_sum))

        return cls(instructions)

    def __iter__(self) -> Iterator[AdditionInstruction]:
        return iter(self._instructions)

    def __getitem__(self, index: int) -> AdditionInstruction:
        if index < 0 or index >= len(self._instructions):
            raise IndexError(f"instruction index {index} is out of range")
        return self._instructions[index]

    def __len__(self) -> int:
        return len(self._instructions)

    def __repr__(self) -> str:
        return f"OrderOfSummation({list(self._instructions)!r})"