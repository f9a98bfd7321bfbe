from dataclasses import dataclass
from typing import Tuple, Union


@dataclass(frozen=True)
class SignalRef:
    """Read a single signal, e.g. ``Signal1``."""
    name: str


@dataclass(frozen=True)
class And:
    """Conjunction, e.g. ``Signal1 * Signal2``."""
    left: "Expr"
    right: "Expr"


@dataclass(frozen=True)
class Or:
    """Disjunction, e.g. ``Signal1 + Signal2``."""
    left: "Expr"
    right: "Expr"


@dataclass(frozen=True)
class Not:
    """Negation, e.g. ``/Signal1``."""
    operand: "Expr"


@dataclass(frozen=True)
class Apply:
    """Application of a defined function, e.g. ``xor(Signal1, /Signal2)``.

    Parameters
    ----------
    function : str
        The name of the applied function.
    args : tuple of Expr
        The argument expressions. A list is accepted and stored as a tuple
        so that the node stays immutable.
    """
    function: str
    args: Tuple["Expr", ...] = ()

    def __post_init__(self):
        object.__setattr__(self, "args", tuple(self.args))


Expr = Union[SignalRef, And, Or, Not, Apply]
