"""Argument recycling for scalar-oriented functions."""
from .params import Parameter, ParameterSpec
from .engine import (
    BroadcastSet,
    broadcast,
    common_length,
    element_count,
    is_sequence,
    recycle,
)
