from .monitor import Monitor
from .vcdwriter import VCDWriter


class SimConfig:
    """A class that holds settings for controlling the behavior of the simulation.

    An instance of this class is passed when initializing the `Simulator`.
    It defines global settings that affect the entire simulation run.

    Parameters
    ----------
    monitor : Monitor, optional
        Receives the lifecycle hooks of the run. Defaults to a `Monitor`
        that does nothing.
    vcd : VCDWriter, optional
        An opened writer that receives every signal after each cycle.
        Defaults to `None` (no waveform dump).
    max_call_depth : int, optional
        The maximum nesting of function applications. Defaults to `64`.
        Deeper nesting raises a `CallDepthExceeded`.
    check_structure : bool, optional
        Whether to validate the circuit structure before initialization.
        Defaults to `True`.

    Examples
    --------
    >>> vcd = VCDWriter()
    >>> vcd.open("run.vcd")
    >>> config = SimConfig(monitor=LoggingMonitor(), vcd=vcd)
    >>> Simulator(circuit, config).run()
    >>> vcd.close()

    See Also
    --------
    Simulator, Monitor
    """
    def __init__(
            self,
            monitor: Monitor = None,
            vcd: VCDWriter = None,
            max_call_depth: int = 64,
            check_structure: bool = True,
    ):
        self.monitor = monitor if monitor is not None else Monitor()
        self.vcd = vcd
        self.max_call_depth = max_call_depth
        self.check_structure = check_structure

    def __iter__(self):
        for attr, value in self.__dict__.items():
            if not attr.startswith("_"):
                yield attr, value
