from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .expr import Expr
from .error import CircuitStructureError


def primed(latch: str) -> str:
    """Return the name of the registered output of ``latch``."""
    return latch + "'"


@dataclass(frozen=True)
class FunctionDef:
    """Definition of a function, e.g. ``def xor(A,B) = A * /B + /A * B``.

    Parameters
    ----------
    name : str
        The function name, e.g. ``"xor"``.
    parameters : tuple of str
        The formal parameters, e.g. ``("A", "B")``.
    body : Expr
        The expression computed from the parameters.
    """
    name: str
    parameters: Tuple[str, ...]
    body: Expr

    def __post_init__(self):
        object.__setattr__(self, "parameters", tuple(self.parameters))

    @property
    def arity(self) -> int:
        return len(self.parameters)


@dataclass(frozen=True)
class Update:
    """One line ``signal = expression`` of the update section."""
    target: str
    value: Expr


@dataclass(frozen=True)
class Trace:
    """A signal and its value in every simulation cycle.

    Used both for the simulation inputs of a circuit and for the recorded
    outputs. Index 0 is cycle 0.

    Examples
    --------
    >>> t = Trace.from_bits("In", "1010")
    >>> str(t)
    'In = 1010'
    """
    signal: str
    values: Tuple[bool, ...] = ()

    def __post_init__(self):
        for v in self.values:
            if not isinstance(v, int) or v not in (0, 1):
                raise ValueError(f"Invalid sample {v!r} in trace for '{self.signal}'")
        object.__setattr__(self, "values", tuple(bool(v) for v in self.values))

    @classmethod
    def from_bits(cls, signal: str, bits: str) -> "Trace":
        """Build a trace from a string of ``0`` and ``1`` characters."""
        values = []
        for ch in bits:
            if ch not in "01":
                raise ValueError(f"Invalid bit {ch!r} in trace for '{signal}'")
            values.append(ch == "1")
        return cls(signal, tuple(values))

    def __len__(self) -> int:
        return len(self.values)

    def __str__(self) -> str:
        return f"{self.signal} = " + "".join("1" if v else "0" for v in self.values)


class Circuit:
    """The entire circuit: signals, definitions, updates and input traces.

    ``simlength`` and ``simoutputs`` are not authored. They are filled in by
    the `Simulator` once a run completes: ``simlength`` is the common length
    of all ``siminputs`` and ``simoutputs`` holds one `Trace` per output
    signal, each of length ``simlength``.

    Parameters
    ----------
    name : str
        The circuit name.
    inputs : sequence of str
        Input signal names, driven by ``siminputs``.
    outputs : sequence of str
        Output signal names, recorded in ``simoutputs``.
    latches : sequence of str
        Latch base names. Latch ``L`` contributes the signals ``L`` (its
        input) and ``L'`` (its output, delayed by one cycle).
    definitions : sequence of FunctionDef
        The function definitions usable in updates.
    updates : sequence of Update
        The update equations, evaluated in list order every cycle.
    siminputs : sequence of Trace
        One trace per input signal.
    """

    def __init__(
            self,
            name: str,
            inputs: Sequence[str] = (),
            outputs: Sequence[str] = (),
            latches: Sequence[str] = (),
            definitions: Sequence[FunctionDef] = (),
            updates: Sequence[Update] = (),
            siminputs: Sequence[Trace] = (),
    ):
        self.name = name
        self.inputs = list(inputs)
        self.outputs = list(outputs)
        self.latches = list(latches)
        self.definitions = list(definitions)
        self.updates = list(updates)
        self.siminputs = list(siminputs)
        self.simoutputs: List[Trace] = []
        self.simlength = 0

    def input_trace(self, signal: str) -> Optional[Trace]:
        """Return the simulation input trace for ``signal``, or None."""
        for trace in self.siminputs:
            if trace.signal == signal:
                return trace
        return None

    def output_trace(self, signal: str) -> Trace:
        """Return the recorded trace of output ``signal``.

        Raises
        ------
        KeyError
            If ``signal`` has no recorded trace.
        """
        for trace in self.simoutputs:
            if trace.signal == signal:
                return trace
        raise KeyError(signal)

    def signal_names(self) -> List[str]:
        """List every signal of the circuit without duplicates.

        Inputs come first, then latch inputs and outputs, then update
        targets, then outputs not written by any update.
        """
        names = list(self.inputs)
        for latch in self.latches:
            names += [latch, primed(latch)]
        names += [u.target for u in self.updates]
        names += self.outputs
        return list(dict.fromkeys(names))

    def check_structure(self) -> None:
        """Validate the structural rules of the circuit.

        Raises
        ------
        CircuitStructureError
            If input, output and latch names overlap or repeat, if a signal
            is updated twice, if an update writes an input or a latch output,
            or if a definition repeats a parameter name.
        """
        roles = (("input", self.inputs), ("output", self.outputs), ("latch", self.latches))
        seen = {}
        for role, names in roles:
            for name in names:
                if name in seen and seen[name] == role:
                    raise CircuitStructureError(f"Signal '{name}' is declared twice as {role}")
                if name in seen:
                    raise CircuitStructureError(
                        f"Signal '{name}' is declared both as {seen[name]} and as {role}"
                    )
                seen[name] = role

        latch_outputs = {primed(latch) for latch in self.latches}
        targets = set()
        for update in self.updates:
            if update.target in targets:
                raise CircuitStructureError(f"Signal '{update.target}' is updated more than once")
            if update.target in self.inputs:
                raise CircuitStructureError(f"Input signal '{update.target}' cannot be updated")
            if update.target in latch_outputs:
                raise CircuitStructureError(
                    f"Latch output '{update.target}' is driven by its latch and cannot be updated"
                )
            targets.add(update.target)

        for definition in self.definitions:
            if len(set(definition.parameters)) != len(definition.parameters):
                raise CircuitStructureError(
                    f"Function '{definition.name}' repeats a parameter name"
                )

    def __repr__(self) -> str:
        return (
            f"Circuit({self.name!r}, inputs={self.inputs}, outputs={self.outputs}, "
            f"latches={self.latches}, simlength={self.simlength})"
        )
