"""
Parameter descriptors for broadcast targets.

A ParameterSpec is read once from a function's signature (or written by hand)
and then reused for every call to that function.
"""

import inspect
from typing import Any, Callable, Iterable, NamedTuple

from optvec.errors import UnexpectedArgument


_NO_DEFAULT = inspect.Parameter.empty

_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


class Parameter(NamedTuple):
    name: str
    has_default: bool
    default: Any = None
    kind: int = inspect.Parameter.POSITIONAL_OR_KEYWORD


class ParameterSpec:
    """Ordered, read-only list of a target function's parameters."""

    def __init__(self, parameters: Iterable[Parameter]):
        params = tuple(parameters)
        if not params:
            raise ValueError("ParameterSpec needs at least one parameter")

        seen = set()
        for p in params:
            if p.kind in _VARIADIC:
                raise ValueError(f"cannot broadcast variadic parameter {p.name!r}")
            if p.name in seen:
                raise ValueError(f"duplicate parameter name {p.name!r}")
            seen.add(p.name)

        self._params = params
        self._by_name = {p.name: p for p in params}

    @classmethod
    def from_function(cls, func: Callable) -> "ParameterSpec":
        sig = inspect.signature(func)
        return cls(
            Parameter(
                name=p.name,
                has_default=p.default is not _NO_DEFAULT,
                default=None if p.default is _NO_DEFAULT else p.default,
                kind=p.kind,
            )
            for p in sig.parameters.values()
        )

    @classmethod
    def from_pairs(cls, pairs: Iterable) -> "ParameterSpec":
        """
        Build from ``name`` strings and ``(name, default)`` tuples.

            ParameterSpec.from_pairs(["a", "b", "k", ("multby2", True)])
        """
        params = []
        for item in pairs:
            if isinstance(item, str):
                params.append(Parameter(item, False))
            else:
                name, default = item
                params.append(Parameter(name, True, default))
        return cls(params)

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self._params)

    @property
    def required(self) -> tuple[str, ...]:
        return tuple(p.name for p in self._params if not p.has_default)

    def __iter__(self):
        return iter(self._params)

    def __len__(self):
        return len(self._params)

    def __contains__(self, name):
        return name in self._by_name

    def __getitem__(self, name: str) -> Parameter:
        return self._by_name[name]

    def __repr__(self):
        parts = [
            f"{p.name}={p.default!r}" if p.has_default else p.name
            for p in self._params
        ]
        return f"ParameterSpec({', '.join(parts)})"

    def bind(self, *args, **kwargs) -> dict:
        """
        Map a concrete call onto parameter names.

        Returns only the supplied arguments; defaults are left for broadcast()
        to resolve. Required parameters that are absent are not an error here.
        """
        positional = [
            p for p in self._params if p.kind != inspect.Parameter.KEYWORD_ONLY
        ]
        if len(args) > len(positional):
            raise UnexpectedArgument(
                f"takes {len(positional)} positional argument(s) "
                f"but {len(args)} were given"
            )

        bound = {p.name: value for p, value in zip(positional, args)}

        for name, value in kwargs.items():
            param = self._by_name.get(name)
            if param is None:
                raise UnexpectedArgument(f"got an unexpected keyword argument {name!r}")
            if param.kind == inspect.Parameter.POSITIONAL_ONLY:
                raise UnexpectedArgument(
                    f"positional-only argument {name!r} passed as keyword"
                )
            if name in bound:
                raise UnexpectedArgument(f"got multiple values for argument {name!r}")
            bound[name] = value

        return bound

    def split(self, values: dict) -> tuple[tuple, dict]:
        """Inverse of bind(): positional-only values first, the rest by keyword."""
        args = tuple(
            values[p.name]
            for p in self._params
            if p.kind == inspect.Parameter.POSITIONAL_ONLY
        )
        kwargs = {
            p.name: values[p.name]
            for p in self._params
            if p.kind != inspect.Parameter.POSITIONAL_ONLY
        }
        return args, kwargs
