"""
Data-frame coercion: recycle arguments into columns, then apply row by row.

    frame = coerce_frame(s=100, k=[90, 100, 110], american=True)
    prices = frame_apply(binom_price, frame, nstep=50)
"""

import pandas as pd

from optvec.broadcast import ParameterSpec, broadcast


def coerce_frame(**columns) -> pd.DataFrame:
    """One column per keyword, each recycled to the common length."""
    if not columns:
        raise ValueError("coerce_frame needs at least one column")
    spec = ParameterSpec.from_pairs(list(columns))
    return broadcast(spec, columns).to_frame()


def frame_apply(func, frame: pd.DataFrame, **fixed) -> pd.Series:
    """
    Call ``func`` once per row of ``frame``.

    Columns are passed as keyword arguments; ``fixed`` keywords are passed
    unchanged to every call.
    """
    results = [func(**row, **fixed) for row in frame.to_dict("records")]
    if not results:
        return pd.Series([], index=frame.index, dtype=float)
    return pd.Series(results, index=frame.index, name=getattr(func, "__name__", None))
