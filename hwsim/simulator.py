import logging
from typing import Dict, List

from .circuit import Circuit, Trace, primed
from .environment import Environment
from .evaluator import Evaluator
from .simconfig import SimConfig
from .vcdwriter import _IVCDSignal
from .error import (
    MissingInputTrace,
    InconsistentTraceLength,
    NoSimulationInputs,
    InputTraceExhausted,
)

logger = logging.getLogger(__name__)


class VCDSignalAdapter(_IVCDSignal):
    """Expose one signal of the simulation environment to the VCD writer.

    Parameters
    ----------
    env : Environment
        The root environment of the simulation.
    name : str
        The signal name.
    is_latch_output : bool
        Whether the signal is a latch output.
    scope : list of str
        The hierarchical scope, i.e. the circuit name.
    """

    def __init__(self, env: Environment, name: str, is_latch_output: bool, scope: List[str]):
        self._env = env
        self._name = name
        self._is_latch_output = is_latch_output
        self._scope = scope

    @property
    def name(self) -> str:
        return self._name

    @property
    def is_latch_output(self) -> bool:
        return self._is_latch_output

    @property
    def value(self) -> bool:
        return self._env.get_variable(self._name)

    @property
    def scope(self) -> List[str]:
        return self._scope


class Simulator:
    """Run a circuit cycle by cycle against its input traces.

    The simulation has two phases. Initialization runs once: it seeds every
    input with its first trace value, checks that all traces share one
    length (which becomes ``simlength``), resets every latch output to 0 and
    applies all updates. Each following cycle ``i`` then

    1. copies every latch input to its output (``L'`` takes the value ``L``
       had at the end of cycle ``i - 1``),
    2. seeds every input with its trace value at index ``i``,
    3. applies all updates once, in list order.

    There is no fixed-point iteration: every cycle is a single pass over
    the updates, so an update reading a signal computed by a later update
    sees the previous cycle's value (or fails with `UnboundSignal` in
    cycle 0).

    Parameters
    ----------
    circuit : Circuit
        The circuit to simulate. Its ``simlength`` and ``simoutputs`` are
        set once `run` completes.
    config : SimConfig, optional
        The simulation settings. Defaults to ``SimConfig()``.

    Raises
    ------
    DuplicateDefinition
        If two function definitions of the circuit share a name.

    Examples
    --------
    >>> circuit = Circuit(
    ...     "inverter",
    ...     inputs=["In"],
    ...     outputs=["Out"],
    ...     updates=[Update("Out", Not(SignalRef("In")))],
    ...     siminputs=[Trace.from_bits("In", "1010")],
    ... )
    >>> Simulator(circuit).run()
    >>> str(circuit.output_trace("Out"))
    'Out = 0101'
    """

    def __init__(self, circuit: Circuit, config: SimConfig = None):
        self.circuit = circuit
        self.config = config or SimConfig()
        self.env = Environment()
        self.evaluator = Evaluator(max_call_depth=self.config.max_call_depth)
        self.simlength = 0
        self._history: Dict[str, List[bool]] = {}
        for definition in circuit.definitions:
            self.env.define_function(definition)

    # ---------------------------------------------------------
    # Latches
    # ---------------------------------------------------------
    def latches_init(self):
        """Reset the output of every latch to 0."""
        for latch in self.circuit.latches:
            self.env.set_variable(primed(latch), False)

    def latches_update(self):
        """Copy the current value of every latch input to its output."""
        for latch in self.circuit.latches:
            self.env.set_variable(primed(latch), self.env.get_variable(latch))

    # ---------------------------------------------------------
    # Simulation phases
    # ---------------------------------------------------------
    def initialize(self):
        """Compute cycle 0.

        Raises
        ------
        CircuitStructureError
            If structure checking is enabled and the circuit is malformed.
        MissingInputTrace
            If an input has no trace or an empty one.
        NoSimulationInputs
            If the circuit supplies no traces at all.
        InconsistentTraceLength
            If the traces differ in length.
        """
        circuit = self.circuit
        if self.config.check_structure:
            circuit.check_structure()

        for signal in circuit.inputs:
            trace = circuit.input_trace(signal)
            if trace is None or len(trace) == 0:
                raise MissingInputTrace(signal)
            self.env.set_variable(signal, trace.values[0])

        if not circuit.siminputs:
            raise NoSimulationInputs()
        lengths = {trace.signal: len(trace) for trace in circuit.siminputs}
        if len(set(lengths.values())) != 1:
            raise InconsistentTraceLength(lengths)
        self.simlength = len(circuit.siminputs[0])

        self.latches_init()
        self._apply_updates()

        self._history = {signal: [] for signal in circuit.outputs}
        self._end_cycle(0)
        logger.debug("Initialized %s, simlength=%d", circuit.name, self.simlength)

    def next_cycle(self, i: int):
        """Compute cycle ``i`` from the state left by cycle ``i - 1``.

        Raises
        ------
        InputTraceExhausted
            If an input trace has no value for cycle ``i``.
        """
        self.latches_update()

        for signal in self.circuit.inputs:
            trace = self.circuit.input_trace(signal)
            if trace is None or i >= len(trace):
                raise InputTraceExhausted(signal, i)
            self.env.set_variable(signal, trace.values[i])

        self._apply_updates()
        self._end_cycle(i)

    def run(self):
        """Initialize, then advance through every remaining cycle.

        On success the circuit's ``simlength`` and ``simoutputs`` are set.
        Any error aborts the run and leaves them untouched.
        """
        monitor = self.config.monitor
        monitor.log_sim_start(self.circuit)

        self.initialize()
        if self.config.vcd:
            self._register_signals_for_vcd()
            self.config.vcd._dump_initial()

        for i in range(1, self.simlength):
            logger.debug("Cycle %d", i)
            self.next_cycle(i)
            if self.config.vcd:
                self.config.vcd._dump(i)

        self.circuit.simlength = self.simlength
        self.circuit.simoutputs = [
            Trace(signal, values) for signal, values in self._history.items()
        ]
        monitor.log_sim_end(self.circuit)

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------
    def _apply_updates(self):
        for update in self.circuit.updates:
            self.evaluator.apply(update, self.env)

    def _end_cycle(self, cycle: int):
        """Record the outputs of ``cycle`` and notify the monitor."""
        for signal, values in self._history.items():
            values.append(self.env.get_variable(signal))
        self.config.monitor.log_cycle_end(cycle, self.env.snapshot())

    def _register_signals_for_vcd(self):
        """Register every bound signal of the circuit with the VCD writer."""
        latch_outputs = {primed(latch) for latch in self.circuit.latches}
        scope = [self.circuit.name]
        for name in self.circuit.signal_names():
            if name in self.env:
                self.config.vcd._register(
                    VCDSignalAdapter(self.env, name, name in latch_outputs, scope)
                )


def run_simulation(circuit: Circuit, config: SimConfig = None) -> List[Trace]:
    """Simulate ``circuit`` and return its recorded output traces."""
    Simulator(circuit, config).run()
    return circuit.simoutputs
