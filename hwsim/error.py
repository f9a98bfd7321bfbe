class HWSimError(Exception):
    """Base class for all exceptions raised by the hwsim library."""
    pass


# --- Evaluation related ---
class EvaluationError(HWSimError):
    """Base class for errors raised while evaluating expressions."""
    pass


class UnboundSignal(EvaluationError):
    """Raised when a signal is read but no reachable scope binds it.

    There is no implicit default value: a signal that was never written is
    always an error, never treated as ``False``. A frequent cause is an
    update list that reads a signal before the update computing it.
    """

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Signal '{name}' is not bound")


class UndefinedFunction(EvaluationError):
    """Raised when an application names a function with no definition."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Function '{name}' is not defined")


class ArityMismatch(EvaluationError):
    """Raised when a call site passes the wrong number of arguments.

    Attributes
    ----------
    name : str
        The function being applied.
    expected : int
        The number of parameters of the definition.
    actual : int
        The number of arguments at the call site.
    """

    def __init__(self, name: str, expected: int, actual: int):
        self.name = name
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Function '{name}' expects {expected} arguments, but got {actual}"
        )


class DuplicateDefinition(EvaluationError):
    """Raised when two function definitions share a name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Function '{name}' is defined more than once")


class CallDepthExceeded(EvaluationError):
    """Raised when function applications nest deeper than allowed.

    Function bodies have no conditionals, so a definition that applies
    itself never terminates. The evaluator stops after a fixed number of
    nested applications instead of exhausting the interpreter stack.
    """

    def __init__(self, name: str, limit: int):
        self.name = name
        self.limit = limit
        super().__init__(
            f"Application of '{name}' exceeds the maximum call depth of {limit}"
        )


# --- Simulation related ---
class SimulationError(HWSimError):
    """Base class for errors detected by the circuit simulator."""
    pass


class MissingInputTrace(SimulationError):
    """Raised when an input signal has no trace, or an empty one."""

    def __init__(self, signal: str):
        self.signal = signal
        super().__init__(f"Input signal '{signal}' has no simulation trace or no values")


class InconsistentTraceLength(SimulationError):
    """Raised when the simulation input traces disagree on their length.

    Attributes
    ----------
    lengths : dict of str to int
        The length of every supplied trace, keyed by signal name.
    """

    def __init__(self, lengths: dict):
        self.lengths = dict(lengths)
        detail = ", ".join(f"{sig}={n}" for sig, n in self.lengths.items())
        super().__init__(f"All simulation inputs must have the same length ({detail})")


class NoSimulationInputs(SimulationError):
    """Raised when a circuit supplies no simulation input traces at all."""

    def __init__(self):
        super().__init__("No simulation inputs provided")


class InputTraceExhausted(SimulationError):
    """Raised when a cycle index lies beyond the end of an input trace."""

    def __init__(self, signal: str, cycle: int):
        self.signal = signal
        self.cycle = cycle
        super().__init__(f"Input signal '{signal}' is not defined for cycle {cycle}")


class CircuitStructureError(SimulationError):
    """Raised when a circuit violates its structural rules.

    Examples
    --------
    - A signal declared both as an input and as an output.
    - Two updates writing the same signal.
    - An update writing an input or the primed output of a latch.
    """
    pass
