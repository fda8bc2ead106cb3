from dataclasses import dataclass


@dataclass
class BroadcastConfig:
    """Broadcasting behaviour shared by the decorator and the helpers."""

    # Element counting
    strings_are_scalars: bool = True   # False counts characters, like any sequence
    allow_empty: bool = True           # length-0 arguments force L = 0

    # vectorized() defaults
    default_mode: str = "loop"         # "loop" or "array"
    unwrap_scalars: bool = True        # all-scalar call returns a bare result


DEFAULT_CONFIG = BroadcastConfig()
