"""
Decorator that makes a scalar-only function accept vector arguments.

The wrapped function's parameters are read once, at decoration time. On each
call the supplied arguments are bound to names, recycled together with every
unsupplied default, and the body is re-run:

    mode="loop"   once per index with scalar arguments
    mode="array"  once, with each parameter rebound to a numpy array

Usage:
    @vectorized
    def binom_price(s, k, v, r, tt, d, nstep=10, american=True):
        if american:            # plain scalar `if` is safe here
            ...

    binom_price(100, [90, 100, 110], 0.3, 0.08, 1, 0)   # -> array of 3
"""

import functools
import logging
import numbers

import numpy as np

from optvec.broadcast import ParameterSpec, broadcast, is_sequence
from optvec.config import DEFAULT_CONFIG, BroadcastConfig

logger = logging.getLogger(__name__)

MODES = ("loop", "array")


def _call(spec: ParameterSpec, func, values: dict):
    args, kwargs = spec.split(values)
    return func(*args, **kwargs)


def _collect(results: list):
    """Stack numeric/boolean results into an array, leave anything else as a list."""
    if not results:
        return np.array([])
    if all(isinstance(r, (numbers.Number, np.bool_)) for r in results):
        return np.asarray(results)
    return results


def _unwrap(result):
    if isinstance(result, np.ndarray) and result.shape == (1,):
        return result[0]
    return result


def vectorized(
    func=None,
    *,
    mode: str | None = None,
    config: BroadcastConfig | None = None,
):
    """
    Broadcast every argument of ``func``, including defaulted ones.

    Can be used bare (``@vectorized``) or with options
    (``@vectorized(mode="array")``).
    """
    if func is None:
        return functools.partial(vectorized, mode=mode, config=config)

    config = config or DEFAULT_CONFIG
    mode = mode or config.default_mode
    if mode not in MODES:
        raise ValueError(f"mode must be one of {MODES}, got {mode!r}")

    spec = ParameterSpec.from_function(func)

    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        bound = spec.bind(*args, **kwargs)
        bset = broadcast(spec, bound, config)
        all_scalar = not any(is_sequence(v, config) for v in bound.values())

        if mode == "array":
            result = _call(spec, func, bset.as_arrays())
            if all_scalar and config.unwrap_scalars:
                return _unwrap(result)
            return result

        results = [_call(spec, func, row) for row in bset.rows()]
        logger.debug("%s evaluated %d times", getattr(func, "__name__", func), len(results))
        if all_scalar and config.unwrap_scalars:
            return results[0]
        return _collect(results)

    wrapper.param_spec = spec
    wrapper.mode = mode
    return wrapper
