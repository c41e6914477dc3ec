"""Rate discovery by bisection.

Solves f(rate) = 0 with

  f(rate) = principal + Σ CF_t / (1 + rate)^t        t = 1..N

where the principal is the period-0 inflow and every CF_t is an outflow
(≤ 0).  f is then increasing in ``rate``, so:

  f(mid) > 0  → root is below mid → high = mid
  f(mid) ≤ 0  → root is above mid → low  = mid

Search bracket is [−0.99, 10.0] per period.  Stops when |f(mid)| < 1e-4
(currency units) or after 1000 iterations; on exhaustion the midpoint of
the last bracket is returned with ``converged=False``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

import numpy as np

logger = logging.getLogger(__name__)

RATE_LOW = -0.99
RATE_HIGH = 10.0
TOLERANCE = 1e-4
MAX_ITERATIONS = 1000


@dataclass(frozen=True)
class RootResult:
    """Outcome of one bisection solve."""

    rate: float
    """Periodic (monthly) decimal rate."""

    residual: float
    """|f(rate)| in currency units."""

    iterations: int
    converged: bool
    """False when the iteration budget ran out before reaching the tolerance."""


def present_values(cash_flows: Sequence[float] | np.ndarray, rate: float) -> np.ndarray:
    """PV of each flow, CF_t / (1 + rate)^t with t = index + 1.

    Zero flows stay exactly zero even when the discount factor
    under- or overflows.
    """
    cf = np.asarray(cash_flows, dtype=np.float64)
    periods = np.arange(1, cf.size + 1, dtype=np.float64)
    with np.errstate(over="ignore", under="ignore", divide="ignore", invalid="ignore"):
        factors = np.power(1.0 + rate, periods)
        return np.divide(cf, factors, out=np.zeros_like(cf), where=cf != 0)


def net_present_value(principal: float, cash_flows: Sequence[float] | np.ndarray, rate: float) -> float:
    """principal + Σ CF_t / (1 + rate)^t."""
    return float(principal + present_values(cash_flows, rate).sum())


def solve_periodic_rate(
    principal: float,
    cash_flows: Sequence[float] | np.ndarray,
    low: float = RATE_LOW,
    high: float = RATE_HIGH,
    tol: float = TOLERANCE,
    max_iter: int = MAX_ITERATIONS,
) -> RootResult:
    """Find the periodic rate at which ``net_present_value`` is zero.

    Never raises on non-convergence: the best estimate is returned and a
    warning is logged.
    """
    cf = np.asarray(cash_flows, dtype=np.float64)

    for iteration in range(1, max_iter + 1):
        mid = (low + high) / 2
        f_mid = net_present_value(principal, cf, mid)

        if abs(f_mid) < tol:
            logger.debug("bisection converged in %d iterations (rate=%.10f)", iteration, mid)
            return RootResult(rate=mid, residual=abs(f_mid), iterations=iteration, converged=True)

        if f_mid > 0:
            high = mid
        else:
            low = mid

    mid = (low + high) / 2
    residual = abs(net_present_value(principal, cf, mid))
    logger.warning(
        "bisection did not reach tolerance %.1e after %d iterations; "
        "returning rate=%.10f with residual %.6g",
        tol, max_iter, mid, residual,
    )
    return RootResult(rate=mid, residual=residual, iterations=max_iter, converged=False)
