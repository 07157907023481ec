import pytest

from spinner.model_input import ModelInput
from spinner.symbolic_worker import SymbolType


def test_mults_are_kept():
    mults = [2, 3, 4]
    model_input = ModelInput(mults)
    assert model_input.mults == tuple(mults)


def test_mults_are_copied():
    mults = [2, 2]
    model_input = ModelInput(mults)
    mults.append(5)
    assert model_input.mults == (2, 2)


def test_symbolic_worker_sized_by_mults():
    model_input = ModelInput([2, 2, 2])
    worker = model_input.symbolic_worker
    assert worker.number_of_spins == len(model_input.mults)
    g = worker.add_symbol("g", 2.0)
    worker.assign_symbol_to_g_factor(g, 2)
    with pytest.raises(IndexError):
        worker.assign_symbol_to_g_factor(g, 3)


def test_symbolic_worker_changes_persist():
    model_input = ModelInput([2, 2])
    j = model_input.symbolic_worker.add_symbol("J", 10.0)
    model_input.symbolic_worker.assign_symbol_to_isotropic_exchange(j, 0, 1)
    assert model_input.symbolic_worker.is_isotropic_exchange_initialized()
    assert model_input.symbolic_worker.changeable_names(SymbolType.J) == [j]