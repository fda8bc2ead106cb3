"""
Recycling engine: expand every argument of a call to one common length.

Rules:
  element count = 1 for a scalar, len(x) for an ordered sequence
  L = max count over supplied arguments (L = 1 when all are scalars)
  every supplied count must be 1 or L, otherwise IncompatibleLength
  unit arguments and unsupplied defaults are replicated L times

A zero-length argument sets L = 0; unit arguments then recycle to nothing.
"""

import array
import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
import pandas as pd

from optvec.broadcast.params import ParameterSpec
from optvec.config import DEFAULT_CONFIG, BroadcastConfig
from optvec.errors import IncompatibleLength, MissingArgument, UnexpectedArgument

logger = logging.getLogger(__name__)


@dataclass
class BroadcastSet:
    values: dict                        # name -> list of length L, declaration order
    length: int                         # L
    supplied: tuple[str, ...] = field(default_factory=tuple)
    defaulted: tuple[str, ...] = field(default_factory=tuple)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(self.values)

    def __getitem__(self, name: str) -> list:
        return self.values[name]

    def rows(self):
        """Yield one {name: element} dict per index 0..L-1."""
        for i in range(self.length):
            yield {name: seq[i] for name, seq in self.values.items()}

    def as_arrays(self) -> dict:
        return {name: np.asarray(seq) for name, seq in self.values.items()}

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.values, columns=list(self.values))


def is_sequence(value, config: BroadcastConfig | None = None) -> bool:
    config = config or DEFAULT_CONFIG
    if isinstance(value, (str, bytes, bytearray)):
        return not config.strings_are_scalars
    if isinstance(value, np.ndarray):
        return value.ndim > 0
    if isinstance(value, (pd.Series, pd.Index, array.array)):
        return True
    return isinstance(value, Sequence)


def element_count(value, config: BroadcastConfig | None = None) -> int:
    """Number of elements ``value`` contributes to broadcasting."""
    if is_sequence(value, config):
        return len(value)
    return 1


def recycle(
    value,
    length: int,
    config: BroadcastConfig | None = None,
    name: str = "value",
) -> list:
    """Expand ``value`` to a list of ``length`` elements."""
    if not is_sequence(value, config):
        return [value] * length

    n = len(value)
    if n == length:
        return list(value)
    if n == 1:
        return list(value) * length
    raise IncompatibleLength({name: n}, length)


def common_length(counts: dict, config: BroadcastConfig | None = None) -> int:
    """Resolve L from per-argument element counts, validating every count."""
    config = config or DEFAULT_CONFIG
    if not counts:
        return 1

    empty = {name: n for name, n in counts.items() if n == 0}
    if empty:
        if not config.allow_empty:
            raise IncompatibleLength(
                empty, 0,
                message=f"zero-length argument(s) not allowed: {', '.join(empty)}",
            )
        length = 0
    else:
        length = max(counts.values())

    bad = {name: n for name, n in counts.items() if n not in (1, length)}
    if bad:
        raise IncompatibleLength(bad, length)
    return length


def broadcast(
    param_spec: ParameterSpec,
    args: dict,
    config: BroadcastConfig | None = None,
) -> BroadcastSet:
    """
    Recycle supplied arguments and defaults to a common length.

    ``args`` maps parameter names to supplied values (scalars or sequences).
    Parameters absent from ``args`` take their declared default, replicated to
    the common length; defaults do not take part in choosing that length.

    Raises:
        MissingArgument: a parameter without a default is absent.
        UnexpectedArgument: ``args`` names a parameter not in ``param_spec``.
        IncompatibleLength: a supplied count is neither 1 nor L.
    """
    config = config or DEFAULT_CONFIG

    unknown = [name for name in args if name not in param_spec]
    if unknown:
        raise UnexpectedArgument(f"unknown parameter(s): {', '.join(unknown)}")

    missing = [name for name in param_spec.required if name not in args]
    if missing:
        raise MissingArgument(missing)

    supplied = tuple(name for name in param_spec.names if name in args)
    defaulted = tuple(name for name in param_spec.names if name not in args)

    counts = {name: element_count(args[name], config) for name in supplied}
    length = common_length(counts, config)

    values = {}
    for p in param_spec:
        if p.name in args:
            values[p.name] = recycle(args[p.name], length, config, name=p.name)
        else:
            values[p.name] = [p.default] * length

    if length == 0:
        logger.warning("Broadcast to length 0 (empty: %s)",
                       [name for name, n in counts.items() if n == 0])
    logger.debug("Broadcast %d supplied, %d defaulted to length %d",
                 len(supplied), len(defaulted), length)

    return BroadcastSet(
        values=values,
        length=length,
        supplied=supplied,
        defaulted=defaulted,
    )
