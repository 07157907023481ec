# spinner

Building blocks for modelling systems of coupled magnetic spins: spin algebra
for coupling multiplicities, a symbolic description of model parameters, their
numerical values, and nonlinear solvers for fitting those values.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Overview

- `spinner.direct_sum.MultiplicityDirectSum`: direct sums of spin
  multiplicities (2S + 1). `+` concatenates sums, `*` couples them (for example
  `2 * 2` gives `1 + 3`). Equality ignores the order of the terms.
- `spinner.order_of_summation.OrderOfSummation`: the order in which the spins of
  the centers are coupled, as a sequence of `AdditionInstruction`s. It is built
  with `OrderOfSummation.construct_from_orbits`, which couples symmetry orbits
  first and then the remaining positions pairwise.
- `spinner.representations_multiplier.RepresentationsMultiplier`: gives the
  symmetry representation of a coupled state from the Cayley tables of the
  groups. Coupling inside an orbit is handled for the two-element permutation
  group only.
- `spinner.s_squared_state`: `SSquaredState` records one coupling path.
  `add_all_multiplicities_and_sort` lists every path and groups them by total
  multiplicity and representations (`Properties`), in sorted order.
- `spinner.symbolic_worker.SymbolicWorker`: registers named symbols
  (`SymbolName`) with values and types (`SymbolType`: exchange `J`, g factor,
  zero-field splitting `D`, `Theta`) and assigns them to centers.
- `spinner.model_input.ModelInput`: the multiplicities of the centers together
  with a `SymbolicWorker` sized for them.
- `spinner.numerical_worker.NumericalWorker`: turns symbols into numpy
  parameter arrays (exchange matrix, g factors and their products, D values,
  Theta) and their derivatives. The arrays are read-only views that follow
  later changes made through `set_new_value_to_changeable_symbol`.
- `spinner.nonlinear_solver`: `LBFGSSolver` (uses gradients) and
  `NelderMeadSolver` (does not), both implementing `AbstractNonlinearSolver`.

## Examples

Coupling two spins 1/2:

```python
from spinner.direct_sum import MultiplicityDirectSum
from spinner.order_of_summation import OrderOfSummation
from spinner.representations_multiplier import RepresentationsMultiplier
from spinner.s_squared_state import add_all_multiplicities_and_sort

print(list(MultiplicityDirectSum(2) * MultiplicityDirectSum(2)))  # [1, 3]

order = OrderOfSummation.construct_from_orbits([], 2, 1)
states = add_all_multiplicities_and_sort([2, 2], order, RepresentationsMultiplier())
print([p.multiplicity for p in states])  # [1, 3]
```

Symbols and their numerical values:

```python
from spinner.symbolic_worker import SymbolicWorker
from spinner.numerical_worker import NumericalWorker

symbols = SymbolicWorker(2)
j = symbols.add_symbol("J", 10.0)
symbols.assign_symbol_to_isotropic_exchange(j, 0, 1)

numbers = NumericalWorker(symbols, 2)
exchange = numbers.isotropic_exchange_parameters()
numbers.set_new_value_to_changeable_symbol(j, 12.0)
print(exchange[0, 1])  # 12.0
```

Fitting with a solver. The step function takes the current values and a flag
saying whether a gradient is wanted, and returns the residual error together
with the gradient (or `None` when it is not wanted). `optimize` returns the
values at the minimum.

```python
from spinner.nonlinear_solver import LBFGSSolver, NelderMeadSolver

def step(values, need_gradient):
    residual = sum((v - 3.0) ** 2 for v in values)
    gradient = [2 * (v - 3.0) for v in values] if need_gradient else None
    return residual, gradient

print(LBFGSSolver().optimize(step, [0.0, 1.0]))       # close to [3.0, 3.0]
print(NelderMeadSolver().optimize(step, [0.0, 1.0]))  # close to [3.0, 3.0]
```

## What the package does not do

The package provides the parameter bookkeeping, spin-coupling algebra and
solvers only. It does not build or diagonalise Hamiltonian matrices, does not
compute magnetic properties such as susceptibility from a model, and has no
command-line program; fitting requires you to supply the residual function.