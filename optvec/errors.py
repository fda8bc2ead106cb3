"""
Exceptions raised while binding and broadcasting call arguments.

Each error also derives from the builtin Python raises for the same mistake
in a plain call, so ``except TypeError`` keeps working around decorated code.
"""


class BroadcastError(Exception):
    """Base class for optvec errors."""


class MissingArgument(BroadcastError, TypeError):
    """A parameter without a default was not supplied."""

    def __init__(self, names):
        self.names = tuple(names)
        listed = ", ".join(repr(n) for n in self.names)
        super().__init__(f"missing required argument(s): {listed}")


class UnexpectedArgument(BroadcastError, TypeError):
    """An argument does not map onto exactly one declared parameter."""


class IncompatibleLength(BroadcastError, ValueError):
    """Supplied arguments cannot be recycled to a common length."""

    def __init__(self, lengths: dict, target: int, message: str | None = None):
        self.lengths = dict(lengths)
        self.target = target
        if message is None:
            detail = ", ".join(f"{name}={n}" for name, n in self.lengths.items())
            message = (
                f"cannot recycle to length {target}: {detail} "
                f"(each argument must have length 1 or {target})"
            )
        super().__init__(message)
