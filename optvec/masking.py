"""
Boolean masking: element-wise selection in place of a scalar ``if``.

``if cond: a else: b`` only looks at one truth value. When ``cond`` arrives as
a vector, select per element instead, after recycling all three operands to a
common length.
"""

import numpy as np

from optvec.broadcast import ParameterSpec, broadcast
from optvec.config import BroadcastConfig

_WHERE_SPEC = ParameterSpec.from_pairs(["condition", "if_true", "if_false"])


def where(condition, if_true, if_false, config: BroadcastConfig | None = None) -> np.ndarray:
    bset = broadcast(
        _WHERE_SPEC,
        {"condition": condition, "if_true": if_true, "if_false": if_false},
        config,
    )
    arrays = bset.as_arrays()
    mask = arrays["condition"].astype(bool)
    return np.where(mask, arrays["if_true"], arrays["if_false"])
