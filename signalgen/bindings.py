"""
bindings.py

Responsibility: Derive the template parameters for one signal arity.

A binding is either `ZeroArity` or `NAryArity`. Templates never see the variant
itself; `as_context()` flattens it into the string-keyed mapping passed to the
renderer:

- `arg_count`: the arity (int, so templates can branch on it)
- `template_signature`: `typename _P1, typename _P2, ...`
- `arg_type_list`: `_P1, _P2, ...`
- `arg_signature`: `_P1 p1, _P2 p2, ...`
- `arg_list`: `p1, p2, ...`
"""

from __future__ import annotations

from dataclasses import dataclass, field

ZERO_TEMPLATE_SIGNATURE = "typename _NoParam = void"
ZERO_TYPE = "void"

_JOIN = ", "


class InvalidArity(ValueError):
    pass


@dataclass(frozen=True)
class ParamSlot:
    """One positional parameter, indexed from 1."""

    index: int

    @property
    def type_param(self) -> str:
        return f"typename _P{self.index}"

    @property
    def type_name(self) -> str:
        return f"_P{self.index}"

    @property
    def declaration(self) -> str:
        return f"{self.type_name} {self.name}"

    @property
    def name(self) -> str:
        return f"p{self.index}"


@dataclass(frozen=True)
class ZeroArity:
    count: int = field(default=0, init=False)

    def as_context(self) -> dict[str, object]:
        return {
            "arg_count": 0,
            "template_signature": ZERO_TEMPLATE_SIGNATURE,
            "arg_type_list": ZERO_TYPE,
            "arg_signature": ZERO_TYPE,
            "arg_list": "",
        }


@dataclass(frozen=True)
class NAryArity:
    count: int
    slots: tuple[ParamSlot, ...]

    def as_context(self) -> dict[str, object]:
        return {
            "arg_count": self.count,
            "template_signature": _JOIN.join(s.type_param for s in self.slots),
            "arg_type_list": _JOIN.join(s.type_name for s in self.slots),
            "arg_signature": _JOIN.join(s.declaration for s in self.slots),
            "arg_list": _JOIN.join(s.name for s in self.slots),
        }


Binding = ZeroArity | NAryArity


def build_binding(arity: int) -> Binding:
    """
    Return the binding variant for `arity`.

    Raises InvalidArity for negative or non-integer input.
    """
    # bool is an int subclass but never a parameter count.
    if isinstance(arity, bool) or not isinstance(arity, int):
        raise InvalidArity(f"Arity must be an integer, got {arity!r}")
    if arity < 0:
        raise InvalidArity(f"Arity must be non-negative, got {arity}")
    if arity == 0:
        return ZeroArity()
    return NAryArity(count=arity, slots=tuple(ParamSlot(i) for i in range(1, arity + 1)))


def binding_context(arity: int) -> dict[str, object]:
    return build_binding(arity).as_context()
