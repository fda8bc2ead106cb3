"""Vectorization helpers for scalar-oriented pricing functions."""
from .errors import BroadcastError, IncompatibleLength, MissingArgument, UnexpectedArgument
from .config import BroadcastConfig, DEFAULT_CONFIG
from .broadcast import BroadcastSet, Parameter, ParameterSpec, broadcast, element_count, recycle
from .vectorize import vectorized
from .masking import where
from .frames import coerce_frame, frame_apply

__version__ = "0.1.0"
