"""Named symbolic parameters of a spin Hamiltonian and their assignment to centers."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass


@dataclass(frozen=True, order=True)
class SymbolName:
    """Name of a symbolic parameter; symbols are ordered by name."""

    name: str = ""

    def __str__(self) -> str:
        return self.name


class SymbolType(enum.Enum):
    """Physical meaning of a symbol."""

    NOT_SPECIFIED = enum.auto()
    J = enum.auto()
    G_FACTOR = enum.auto()
    THETA = enum.auto()
    D = enum.auto()


@dataclass(frozen=True)
class ZFSSymbols:
    """Zero-field-splitting symbols of one center."""

    D: SymbolName
    E: SymbolName | None = None


@dataclass
class SymbolData:
    """Current value, changeability and type of a symbol."""

    value: float
    is_changeable: bool
    type_enum: SymbolType


class SymbolicWorker:
    """Registry of symbols and of the parameters of each spin center they stand for."""

    def __init__(self, number_of_spins: int) -> None:
        self._number_of_spins = number_of_spins
        self._isotropic_exchanges: list[list[SymbolName | None]] | None = None
        self._g_factors: list[SymbolName] = []
        self._theta: SymbolName | None = None
        self._zfs: list[ZFSSymbols | None] | None = None
        self._symbols: dict[SymbolName, SymbolData] = {}

    @property
    def number_of_spins(self) -> int:
        """Number of spin centers."""
        return self._number_of_spins

    def _check_center(self, center: int) -> None:
        if not 0 <= center < self._number_of_spins:
            raise IndexError(f"center {center} is out of range")

    def _modify_symbol_data(self, symbol_name: SymbolName) -> SymbolData:
        try:
            return self._symbols[symbol_name]
        except KeyError:
            raise ValueError(f"{symbol_name.name} name has not been initialized") from None

    def _claim_type(self, symbol_name: SymbolName, type_enum: SymbolType, label: str) -> None:
        data = self._modify_symbol_data(symbol_name)
        if data.type_enum not in (SymbolType.NOT_SPECIFIED, type_enum):
            raise ValueError(
                f"{symbol_name.name} has been already specified as not {label} parameter"
            )
        data.type_enum = type_enum

    def add_symbol(
        self,
        name: str,
        initial_value: float,
        is_changeable: bool = True,
        type_enum: SymbolType = SymbolType.NOT_SPECIFIED,
    ) -> SymbolName:
        """Register a new symbol and return its name."""
        if not name:
            raise ValueError("Name of Symbol should be non-empty")
        symbol_name = SymbolName(name)
        if symbol_name in self._symbols:
            raise ValueError(f"{name} name has been already initialized")
        self._symbols[symbol_name] = SymbolData(float(initial_value), is_changeable, type_enum)
        return symbol_name

    def assign_symbol_to_isotropic_exchange(
        self, symbol_name: SymbolName, center_a: int, center_b: int
    ) -> SymbolicWorker:
        """Use the symbol as the isotropic exchange between two centers."""
        if self._isotropic_exchanges is None:
            self._isotropic_exchanges = [
                [None] * self._number_of_spins for _ in range(self._number_of_spins)
            ]
        self._check_center(center_a)
        self._check_center(center_b)
        if center_a == center_b:
            raise ValueError("Isotropic exchange takes place between different centers")
        if self._isotropic_exchanges[center_a][center_b] is not None:
            raise ValueError("This parameter has been already specified")
        self._claim_type(symbol_name, SymbolType.J, "J")
        self._isotropic_exchanges[center_a][center_b] = symbol_name
        self._isotropic_exchanges[center_b][center_a] = symbol_name
        return self

    def assign_symbol_to_g_factor(self, symbol_name: SymbolName, center_a: int) -> SymbolicWorker:
        """Use the symbol as the g factor of a center."""
        self._claim_type(symbol_name, SymbolType.G_FACTOR, "g factor")
        self._check_center(center_a)
        if not self._g_factors:
            self._g_factors = [SymbolName() for _ in range(self._number_of_spins)]
        self._g_factors[center_a] = symbol_name
        return self

    def assign_symbol_to_theta(self, symbol_name: SymbolName) -> SymbolicWorker:
        """Use the symbol as the Weiss constant Theta."""
        self._claim_type(symbol_name, SymbolType.THETA, "Theta")
        self._theta = symbol_name
        return self

    def assign_symbol_to_zfs_no_anisotropy(
        self, symbol_name: SymbolName, center_a: int
    ) -> SymbolicWorker:
        """Use the symbol as the axial zero-field splitting D of a center."""
        self._claim_type(symbol_name, SymbolType.D, "D")
        self._check_center(center_a)
        if self._zfs is None:
            self._zfs = [None] * self._number_of_spins
        self._zfs[center_a] = ZFSSymbols(symbol_name)
        return self

    def is_all_g_factors_equal(self) -> bool:
        """Whether every center shares one g factor symbol."""
        if not self.is_g_factor_initialized():
            raise RuntimeError("g factor parameters have not been initialized")
        first = self._g_factors[0]
        return all(name == first for name in self._g_factors)

    def is_g_factor_initialized(self) -> bool:
        return bool(self._g_factors)

    def is_isotropic_exchange_initialized(self) -> bool:
        return self._isotropic_exchanges is not None

    def is_theta_initialized(self) -> bool:
        return self._theta is not None

    def is_zfs_initialized(self) -> bool:
        return self._zfs is not None

    def isotropic_exchange_symbol_name(self, i: int, j: int) -> SymbolName | None:
        """Exchange symbol between two centers, or None if there is none."""
        if self._isotropic_exchanges is None:
            raise RuntimeError("Isotropic exchange parameters have not been initialized")
        self._check_center(i)
        self._check_center(j)
        return self._isotropic_exchanges[i][j]

    def g_factor_symbol_name(self, i: int) -> SymbolName:
        """g factor symbol of a center (an empty name if unassigned)."""
        if not self.is_g_factor_initialized():
            raise RuntimeError("G factor parameters have not been initialized")
        self._check_center(i)
        return self._g_factors[i]

    def theta_symbol_name(self) -> SymbolName | None:
        return self._theta

    def zfs_symbol_names(self, i: int) -> ZFSSymbols | None:
        """Zero-field-splitting symbols of a center, or None if there are none."""
        if self._zfs is None:
            raise RuntimeError("Zero field splitting parameters have not been initialized")
        self._check_center(i)
        return self._zfs[i]

    def set_new_value_to_changeable_symbol(self, symbol_name: SymbolName, new_value: float) -> None:
        """Change the value of a changeable symbol."""
        data = self._modify_symbol_data(symbol_name)
        if not data.is_changeable:
            raise ValueError("Cannot change value of unchangeable symbol")
        data.value = float(new_value)

    def changeable_names(self, type_enum: SymbolType | None = None) -> list[SymbolName]:
        """Changeable symbols in name order, optionally of one type only."""
        return [
            name
            for name, data in sorted(self._symbols.items())
            if data.is_changeable and (type_enum is None or data.type_enum == type_enum)
        ]

    def value_of(self, symbol_name: SymbolName) -> float:
        return self._modify_symbol_data(symbol_name).value

    def symbol_data(self, symbol_name: SymbolName) -> SymbolData:
        """A copy of the data of a symbol."""
        return dataclasses.replace(self._modify_symbol_data(symbol_name))