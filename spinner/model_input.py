"""User input of a model: multiplicities of the centers and their symbols."""

from __future__ import annotations

from collections.abc import Sequence

from spinner.direct_sum import Multiplicity
from spinner.symbolic_worker import SymbolicWorker


class ModelInput:
    """Multiplicities of the spin centers and a symbol registry sized for them."""

    def __init__(self, mults: Sequence[Multiplicity]) -> None:
        self._mults = tuple(mults)
        self._symbolic_worker = SymbolicWorker(len(self._mults))

    @property
    def symbolic_worker(self) -> SymbolicWorker:
        """The symbol registry, to be filled in by the user."""
        return self._symbolic_worker

    @property
    def mults(self) -> tuple[Multiplicity, ...]:
        return self._mults

    def __repr__(self) -> str:
        return f"ModelInput(mults={list(self._mults)!r})"