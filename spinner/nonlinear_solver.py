"""Minimisers for the residual error of a fit over changeable parameters."""

from __future__ import annotations

import abc
from collections.abc import Callable, Sequence

import numpy as np
from scipy.optimize import minimize

# Called with the current parameter values and whether gradients are wanted;
# returns the residual error and its gradient (None when not wanted).
OneStepFunction = Callable[[list[float], bool], "tuple[float, Sequence[float] | None]"]


class AbstractNonlinearSolver(abc.ABC):
    """A minimiser of a scalar residual over a vector of parameters."""

    @abc.abstractmethod
    def optimize(
        self, one_step_function: OneStepFunction, changeable_values: Sequence[float]
    ) -> list[float]:
        """Minimise the residual starting from ``changeable_values``; return the optimum."""

    @property
    @abc.abstractmethod
    def gradients_required(self) -> bool:
        """Whether the solver asks the step function for gradients."""


class LBFGSSolver(AbstractNonlinearSolver):
    """Limited-memory BFGS minimisation using the analytic gradient."""

    def __init__(self, epsilon: float = 1e-5, max_iterations: int = 100) -> None:
        if epsilon <= 0:
            raise ValueError("epsilon must be positive")
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        self.epsilon = epsilon
        self.max_iterations = max_iterations

    @property
    def gradients_required(self) -> bool:
        return True

    def optimize(
        self, one_step_function: OneStepFunction, changeable_values: Sequence[float]
    ) -> list[float]:
        start = np.asarray(changeable_values, dtype=float)
        if start.size == 0:
            return []

        def fun(x: np.ndarray) -> tuple[float, np.ndarray]:
            residual, gradient = one_step_function(x.tolist(), True)
            if gradient is None:
                raise ValueError("step function returned no gradient, but one is required")
            gradient = np.asarray(gradient, dtype=float)
            if gradient.shape != x.shape:
                raise ValueError(
                    f"gradient has {gradient.size} components, expected {x.size}"
                )
            return float(residual), gradient

        result = minimize(
            fun,
            start,
            jac=True,
            method="L-BFGS-B",
            options={"gtol": self.epsilon, "maxiter": self.max_iterations},
        )
        return [float(v) for v in result.x]

    def __repr__(self) -> str:
        return f"LBFGSSolver(epsilon={self.epsilon!r}, max_iterations={self.max_iterations!r})"


class NelderMeadSolver(AbstractNonlinearSolver):
    """Derivative-free Nelder-Mead simplex minimisation."""

    def __init__(self, max_iterations: int = 2000) -> None:
        if max_iterations <= 0:
            raise ValueError("max_iterations must be positive")
        self.max_iterations = max_iterations

    @property
    def gradients_required(self) -> bool:
        return False

    def optimize(
        self, one_step_function: OneStepFunction, changeable_values: Sequence[float]
    ) -> list[float]:
        start = np.asarray(changeable_values, dtype=float)
        if start.size == 0:
            return []

        def fun(x: np.ndarray) -> float:
            residual, _ = one_step_function(x.tolist(), False)
            return float(residual)

        result = minimize(
            fun,
            start,
            method="Nelder-Mead",
            options={"maxiter": self.max_iterations, "xatol": 1e-8, "fatol": 1e-12},
        )
        return [float(v) for v in result.x]

    def __repr__(self) -> str:
        return f"NelderMeadSolver(max_iterations={self.max_iterations!r})"