import logging
from typing import Mapping

from .circuit import Circuit


def format_snapshot(snapshot: Mapping[str, bool]) -> str:
    """Render an environment snapshot as ``name=value`` pairs.

    Examples
    --------
    >>> format_snapshot({"In": True, "Out": False})
    'In=1 Out=0'
    """
    return " ".join(f"{name}={int(value)}" for name, value in snapshot.items())


class Monitor:
    """Base class for observing a simulation run.

    Override the hook methods to report on the progress of a `Simulator`.
    Every hook receives read-only data; a monitor cannot change the
    simulation.

    Examples
    --------
    >>> class OutCollector(Monitor):
    ...     def __init__(self):
    ...         self.values = []
    ...
    ...     def log_cycle_end(self, cycle, snapshot):
    ...         self.values.append(snapshot["Out"])

    See Also
    --------
    LoggingMonitor, SimConfig
    """

    def log_sim_start(self, circuit: Circuit):
        """Hook method called before initialization."""
        pass

    def log_cycle_end(self, cycle: int, snapshot: Mapping[str, bool]):
        """Hook method called after each cycle, including cycle 0."""
        pass

    def log_sim_end(self, circuit: Circuit):
        """Hook method called once the outputs of a complete run are recorded."""
        pass


class LoggingMonitor(Monitor):
    """Report the environment after every cycle through `logging`.

    Parameters
    ----------
    logger : logging.Logger, optional
        The logger to write to. Defaults to the ``hwsim`` logger.
    level : int, optional
        The level of the per-cycle records. Defaults to ``logging.INFO``.
    """

    def __init__(self, logger: logging.Logger = None, level: int = logging.INFO):
        self.logger = logger or logging.getLogger("hwsim")
        self.level = level

    def log_sim_start(self, circuit):
        self.logger.log(self.level, "Starting simulation of circuit %s", circuit.name)

    def log_cycle_end(self, cycle, snapshot):
        self.logger.log(self.level, "Environment after cycle %d: %s", cycle, format_snapshot(snapshot))

    def log_sim_end(self, circuit):
        self.logger.log(self.level, "Simulation of %s finished after %d cycles", circuit.name, circuit.simlength)
        for trace in circuit.simoutputs:
            self.logger.log(self.level, "%s", trace)
