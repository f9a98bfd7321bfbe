from .expr import SignalRef, And, Or, Not, Apply
from .circuit import FunctionDef, Update, Trace, Circuit
from .environment import Environment
from .evaluator import Evaluator, evaluate, apply_update
from .simulator import Simulator, run_simulation
from .simconfig import SimConfig
from .monitor import Monitor, LoggingMonitor, format_snapshot
from .vcdwriter import VCDWriter
from .error import (
    HWSimError,
    EvaluationError,
    UnboundSignal,
    UndefinedFunction,
    ArityMismatch,
    DuplicateDefinition,
    CallDepthExceeded,
    SimulationError,
    MissingInputTrace,
    InconsistentTraceLength,
    NoSimulationInputs,
    InputTraceExhausted,
    CircuitStructureError,
)

__all__ = [
    'SignalRef',
    'And',
    'Or',
    'Not',
    'Apply',
    'FunctionDef',
    'Update',
    'Trace',
    'Circuit',
    'Environment',
    'Evaluator',
    'evaluate',
    'apply_update',
    'Simulator',
    'run_simulation',
    'SimConfig',
    'Monitor',
    'LoggingMonitor',
    'format_snapshot',
    'VCDWriter',
    'HWSimError',
    'EvaluationError',
    'UnboundSignal',
    'UndefinedFunction',
    'ArityMismatch',
    'DuplicateDefinition',
    'CallDepthExceeded',
    'SimulationError',
    'MissingInputTrace',
    'InconsistentTraceLength',
    'NoSimulationInputs',
    'InputTraceExhausted',
    'CircuitStructureError',
]

__version__ = '0.1.0'
