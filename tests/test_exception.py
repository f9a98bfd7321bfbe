import pytest

from hwsim import (
    Circuit,
    FunctionDef,
    Update,
    Trace,
    SignalRef,
    Not,
    Apply,
    Simulator,
    SimConfig,
    Monitor,
)
from hwsim.error import (
    HWSimError,
    EvaluationError,
    SimulationError,
    UnboundSignal,
    ArityMismatch,
    DuplicateDefinition,
    MissingInputTrace,
    InconsistentTraceLength,
    NoSimulationInputs,
    InputTraceExhausted,
    CircuitStructureError,
)


def passthrough(**kwargs):
    fields = dict(
        inputs=["In"],
        outputs=["Out"],
        updates=[Update("Out", SignalRef("In"))],
        siminputs=[Trace.from_bits("In", "01")],
    )
    fields.update(kwargs)
    return Circuit("dut", **fields)


class CycleCounter(Monitor):
    def __init__(self):
        self.cycles = []

    def log_cycle_end(self, cycle, snapshot):
        self.cycles.append(cycle)


def test_hierarchy():
    assert issubclass(EvaluationError, HWSimError)
    assert issubclass(SimulationError, HWSimError)
    assert issubclass(UnboundSignal, EvaluationError)
    assert issubclass(InputTraceExhausted, SimulationError)
    assert issubclass(CircuitStructureError, SimulationError)


# =================================================================
# Trace validation
# =================================================================
def test_missing_input_trace():
    circuit = passthrough(siminputs=[Trace.from_bits("Other", "01")])
    with pytest.raises(MissingInputTrace) as excinfo:
        Simulator(circuit).run()
    assert excinfo.value.signal == "In"


def test_empty_input_trace():
    circuit = passthrough(siminputs=[Trace("In", [])])
    with pytest.raises(MissingInputTrace):
        Simulator(circuit).run()


def test_no_simulation_inputs():
    circuit = Circuit(
        "constant",
        outputs=["Out"],
        updates=[Update("Out", SignalRef("Out"))],
    )
    with pytest.raises(NoSimulationInputs):
        Simulator(circuit).run()


def test_inconsistent_trace_length_before_any_cycle():
    circuit = Circuit(
        "dut",
        inputs=["In1", "In2"],
        outputs=["Out"],
        updates=[Update("Out", SignalRef("In1"))],
        siminputs=[Trace.from_bits("In1", "01"), Trace.from_bits("In2", "0")],
    )
    monitor = CycleCounter()
    with pytest.raises(InconsistentTraceLength) as excinfo:
        Simulator(circuit, SimConfig(monitor=monitor)).run()
    assert excinfo.value.lengths == {"In1": 2, "In2": 1}
    assert monitor.cycles == []


def test_input_trace_exhausted():
    circuit = passthrough()
    sim = Simulator(circuit)
    sim.initialize()
    sim.next_cycle(1)
    with pytest.raises(InputTraceExhausted) as excinfo:
        sim.next_cycle(2)
    assert (excinfo.value.signal, excinfo.value.cycle) == ("In", 2)


# =================================================================
# Evaluation errors during a run
# =================================================================
def test_update_reading_later_signal_is_unbound():
    circuit = passthrough(updates=[
        Update("Out", Not(SignalRef("Mid"))),
        Update("Mid", SignalRef("In")),
    ])
    with pytest.raises(UnboundSignal) as excinfo:
        Simulator(circuit).run()
    assert excinfo.value.name == "Mid"


def test_arity_mismatch_aborts_run_without_outputs():
    circuit = passthrough(
        definitions=[FunctionDef("first", ["A", "B"], SignalRef("A"))],
        updates=[Update("Out", Apply("first", [SignalRef("In")]))],
    )
    with pytest.raises(ArityMismatch):
        Simulator(circuit).run()
    assert circuit.simoutputs == []
    assert circuit.simlength == 0


def test_duplicate_definition_detected_on_construction():
    circuit = passthrough(definitions=[
        FunctionDef("f", ["A"], SignalRef("A")),
        FunctionDef("f", ["B"], SignalRef("B")),
    ])
    with pytest.raises(DuplicateDefinition):
        Simulator(circuit)


# =================================================================
# Structure checks
# =================================================================
@pytest.mark.parametrize("kwargs", [
    dict(outputs=["In"]),
    dict(outputs=["Out", "Out"]),
    dict(inputs=["In", "In"]),
    dict(latches=["L", "L"]),
    dict(latches=["Out"]),
    dict(updates=[Update("Out", SignalRef("In")), Update("Out", Not(SignalRef("In")))]),
    dict(updates=[Update("In", SignalRef("In")), Update("Out", SignalRef("In"))]),
    dict(latches=["L"], updates=[Update("L'", SignalRef("In")), Update("Out", SignalRef("In"))]),
    dict(definitions=[FunctionDef("f", ["A", "A"], SignalRef("A"))]),
])
def test_malformed_circuit(kwargs):
    with pytest.raises(CircuitStructureError):
        Simulator(passthrough(**kwargs)).run()


def test_structure_check_can_be_disabled():
    circuit = passthrough(outputs=["Out", "In"])
    Simulator(circuit, SimConfig(check_structure=False)).run()
    assert str(circuit.output_trace("In")) == "In = 01"


class LifecycleRecorder(Monitor):
    def __init__(self):
        self.cycles = []
        self.ended = False

    def log_cycle_end(self, cycle, snapshot):
        self.cycles.append(cycle)

    def log_sim_end(self, circuit):
        self.ended = True


def test_failure_after_cycle_zero_publishes_no_outputs():
    # Latch L has no update: cycle 0 only reads L', cycle 1 must read L.
    circuit = passthrough(
        latches=["L"],
        updates=[Update("Out", SignalRef("L'"))],
        siminputs=[Trace.from_bits("In", "010")],
    )
    monitor = LifecycleRecorder()
    with pytest.raises(UnboundSignal) as excinfo:
        Simulator(circuit, SimConfig(monitor=monitor)).run()
    assert excinfo.value.name == "L"
    assert monitor.cycles == [0]
    assert monitor.ended is False
    assert circuit.simoutputs == []
    assert circuit.simlength == 0


def test_repeated_output_rejected_with_message():
    with pytest.raises(CircuitStructureError, match="declared twice as output"):
        Simulator(passthrough(outputs=["Out", "Out"])).run()
