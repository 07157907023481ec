"""Numerical values of symbolic parameters, laid out per spin center."""

from __future__ import annotations

import numpy as np

from spinner.symbolic_worker import SymbolicWorker, SymbolName, SymbolType


def _read_only(array: np.ndarray) -> np.ndarray:
    """A view that follows in-place updates of ``array`` but cannot modify it."""
    view = array.view()
    view.flags.writeable = False
    return view


class NumericalWorker:
    """Keeps numeric parameter arrays in sync with the values of symbols.

    The arrays handed out are read-only views of arrays updated in place,
    so holders of a view see every later change of the symbol values.
    """

    def __init__(self, symbolic_worker: SymbolicWorker, number_of_spins: int) -> None:
        self._symbolic_worker = symbolic_worker
        self._number_of_spins = number_of_spins

        self._isotropic_exchanges: np.ndarray | None = None
        self._g_factors: np.ndarray | None = None
        self._zfs_d: np.ndarray | None = None
        self._theta: np.ndarray | None = None
        self._gg: tuple[np.ndarray, np.ndarray] | None = None
        self._gg_derivatives: dict[SymbolName, tuple[np.ndarray, np.ndarray]] = {}
        self._isotropic_exchange_derivatives: list[np.ndarray] = []

        if symbolic_worker.is_isotropic_exchange_initialized():
            self._update_isotropic_exchange()
        if symbolic_worker.is_zfs_initialized():
            self._update_zfs()
        if symbolic_worker.is_g_factor_initialized():
            self._update_g_factors()
        if symbolic_worker.is_theta_initialized():
            self._update_theta()

    @property
    def symbolic_worker(self) -> SymbolicWorker:
        """The symbol registry this worker reads values from."""
        return self._symbolic_worker

    def _centers(self) -> range:
        return range(self._number_of_spins)

    def _update_isotropic_exchange(self) -> None:
        n = self._number_of_spins
        if self._isotropic_exchanges is None:
            self._isotropic_exchanges = np.full((n, n), np.nan)
        worker = self._symbolic_worker
        for i in self._centers():
            for j in self._centers():
                name = worker.isotropic_exchange_symbol_name(i, j)
                self._isotropic_exchanges[i, j] = (
                    np.nan if name is None else worker.value_of(name)
                )

    def _update_g_factors(self) -> None:
        n = self._number_of_spins
        if self._g_factors is None:
            self._g_factors = np.zeros(n)
        if self._gg is None:
            self._gg = (np.zeros(n), np.zeros((n, n)))

        worker = self._symbolic_worker
        values = [worker.value_of(worker.g_factor_symbol_name(i)) for i in self._centers()]
        self._g_factors[:] = values

        diagonal, nondiagonal = self._gg
        for i, g_i in enumerate(values):
            diagonal[i] = g_i * g_i
            for j, g_j in enumerate(values):
                if i != j:
                    nondiagonal[i, j] = g_i * g_j

        for symbol_name in self._gg_derivatives:
            self._update_gg_derivatives(symbol_name)

    def _update_zfs(self) -> None:
        if self._zfs_d is None:
            self._zfs_d = np.full(self._number_of_spins, np.nan)
        worker = self._symbolic_worker
        for i in self._centers():
            symbols = worker.zfs_symbol_names(i)
            self._zfs_d[i] = np.nan if symbols is None else worker.value_of(symbols.D)

    def _update_theta(self) -> None:
        if self._theta is None:
            self._theta = np.array(np.nan)
        name = self._symbolic_worker.theta_symbol_name()
        if name is None:
            raise RuntimeError("Theta symbol has not been assigned")
        self._theta[()] = self._symbolic_worker.value_of(name)

    def _update_gg_derivatives(self, symbol_name: SymbolName) -> None:
        diagonal, nondiagonal = self._gg_derivatives[symbol_name]
        worker = self._symbolic_worker
        g = self._g_factors
        assert g is not None
        matches = [worker.g_factor_symbol_name(i) == symbol_name for i in self._centers()]
        for i, match_i in enumerate(matches):
            if match_i:
                diagonal[i] = 2 * g[i]
            for j, match_j in enumerate(matches):
                if i == j:
                    continue
                value = 0.0
                if match_i:
                    value += g[j]
                if match_j:
                    value += g[i]
                nondiagonal[i, j] = value

    def _require_type(self, symbol_name: SymbolName, type_enum: SymbolType, label: str) -> None:
        if self._symbolic_worker.symbol_data(symbol_name).type_enum != type_enum:
            raise ValueError(f"{symbol_name.name} has been specified as not {label} parameter")

    def isotropic_exchange_parameters(self) -> np.ndarray:
        """Matrix of exchange values; NaN where centers do not interact."""
        if self._isotropic_exchanges is None:
            raise ValueError("Isotropic exchange interaction was not initialized")
        return _read_only(self._isotropic_exchanges)

    def zfs_parameters(self) -> tuple[np.ndarray, np.ndarray | None]:
        """D values per center (NaN where absent) and E values (not supported, None)."""
        if self._zfs_d is None:
            raise ValueError("Zero field splitting was not initialized")
        return _read_only(self._zfs_d), None

    def theta_parameter(self) -> np.ndarray:
        """Zero-dimensional array holding the value of Theta."""
        if self._theta is None:
            raise ValueError("Theta was not initialized")
        return _read_only(self._theta)

    def g_factor_parameters(self) -> np.ndarray:
        """g factor of every center."""
        if self._g_factors is None:
            raise ValueError("g-factors were not initialized")
        return _read_only(self._g_factors)

    def gg_parameters(self) -> tuple[np.ndarray, np.ndarray]:
        """Squares g_a^2 per center and products g_a*g_b for distinct centers."""
        if self._gg is None:
            raise ValueError("g-factors were not initialized")
        return _read_only(self._gg[0]), _read_only(self._gg[1])

    def construct_isotropic_exchange_derivative_parameters(
        self, symbol_name: SymbolName
    ) -> np.ndarray:
        """Derivative of the exchange matrix with respect to a J symbol."""
        self._require_type(symbol_name, SymbolType.J, "J")
        n = self._number_of_spins
        derivative = np.full((n, n), np.nan)
        worker = self._symbolic_worker
        for i in self._centers():
            for j in self._centers():
                if worker.isotropic_exchange_symbol_name(i, j) == symbol_name:
                    derivative[i, j] = 1.0
        self._isotropic_exchange_derivatives.append(derivative)
        return _read_only(derivative)

    def construct_zfs_derivative_parameters(self, symbol_name: SymbolName) -> np.ndarray:
        """Derivative of the D values with respect to a D symbol."""
        self._require_type(symbol_name, SymbolType.D, "D")
        derivative = np.full(self._number_of_spins, np.nan)
        worker = self._symbolic_worker
        for i in self._centers():
            symbols = worker.zfs_symbol_names(i)
            if symbols is not None and symbols.D == symbol_name:
                derivative[i] = 1.0
        return _read_only(derivative)

    def construct_gg_derivative_parameters(
        self, symbol_name: SymbolName
    ) -> tuple[np.ndarray, np.ndarray]:
        """Derivatives of the g_a^2 and g_a*g_b parameters with respect to a g symbol."""
        self._require_type(symbol_name, SymbolType.G_FACTOR, "g factor")
        if not self._symbolic_worker.is_g_factor_initialized():
            raise RuntimeError("G factor parameters have not been initialized")
        if symbol_name in self._gg_derivatives:
            raise ValueError(
                f"Derivatives from GG for {symbol_name.name} have been already constructed"
            )
        n = self._number_of_spins
        self._gg_derivatives[symbol_name] = (np.zeros(n), np.zeros((n, n)))
        self._update_gg_derivatives(symbol_name)
        diagonal, nondiagonal = self._gg_derivatives[symbol_name]
        return _read_only(diagonal), _read_only(nondiagonal)

    def set_new_value_to_changeable_symbol(
        self, symbol_name: SymbolName, new_value: float
    ) -> None:
        """Change a symbol's value and refresh the parameters depending on it."""
        self._symbolic_worker.set_new_value_to_changeable_symbol(symbol_name, new_value)
        type_enum = self._symbolic_worker.symbol_data(symbol_name).type_enum
        if type_enum == SymbolType.J:
            self._update_isotropic_exchange()
        elif type_enum == SymbolType.G_FACTOR:
            self._update_g_factors()
        elif type_enum == SymbolType.THETA:
            self._update_theta()
        elif type_enum == SymbolType.D:
            self._update_zfs()

    def __repr__(self) -> str:
        return f"NumericalWorker(number_of_spins={self._number_of_spins})"