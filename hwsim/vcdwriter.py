import itertools
from abc import ABC, abstractmethod
from typing import List


class _IVCDSignal(ABC):
    """One single-bit circuit signal as seen by the `VCDWriter`.

    The simulator wraps each signal of its environment in an object with
    this interface, so the writer never touches environments or circuits.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """str: Signal name, e.g. ``Out`` or the latch output ``L'``."""
        ...

    @property
    @abstractmethod
    def is_latch_output(self) -> bool:
        """bool: True for a primed latch output, declared as ``reg``."""
        ...

    @property
    @abstractmethod
    def value(self) -> bool:
        """bool: Value of the signal in the cycle just computed."""
        ...

    @property
    @abstractmethod
    def scope(self) -> List[str]:
        """list of str: Module path the signal is declared under."""
        ...


class VCDWriter:
    """Write the signals of a simulation run as a Value Change Dump.

    Open a file, hand the writer to the simulator through `SimConfig`, and
    close it after the run. Once cycle 0 is computed the simulator registers
    every bound signal and the writer emits the declarations together with
    all cycle-0 values under timestamp ``#0``. Each later cycle ``i`` adds a
    ``#i`` block listing only the signals whose value changed.

    Attributes
    ----------
    filename : str or None
        The path of the dump file.
    f : file object or None
        The open dump file, None before `open` and after `close`.
    signals : list of tuple(_IVCDSignal, str)
        Registered signals paired with their short VCD identifiers.

    Examples
    --------
    >>> vcd = VCDWriter()
    >>> vcd.open("dump.vcd")
    >>> Simulator(circuit, SimConfig(vcd=vcd)).run()
    >>> vcd.close()
    """

    _id_chars = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_$"

    def __init__(self):
        self.filename = None
        self.f = None
        self.signals: List[tuple[_IVCDSignal, str]] = []
        self._last_values = {}
        self._id_iter = itertools.count()
        self._declared = False

    def open(self, filename: str):
        """Create ``filename`` and write the date, version and timescale."""
        self.filename = filename
        self.f = open(filename, "w")
        self.f.write("$date\n\thwsim Simulation\n$end\n")
        self.f.write("$version\n\thwsim\n$end\n")
        self.f.write("$timescale 1ns $end\n")

    def close(self):
        if not self.f:
            return
        self.f.close()
        self.f = None

    def _register(self, sig: _IVCDSignal):
        """Track ``sig`` under the next free identifier."""
        vid = self._new_vcd_id()
        self.signals.append((sig, vid))
        self._last_values[vid] = None

    def _new_vcd_id(self) -> str:
        # Registration count written in base len(_id_chars): a, b, ..., ba, bb, ...
        n = next(self._id_iter)
        digits = []
        while True:
            n, rem = divmod(n, len(self._id_chars))
            digits.append(self._id_chars[rem])
            if n == 0:
                break
        return "".join(reversed(digits))

    def _declare(self):
        """Write one $scope block per module path with its $var lines."""
        if self._declared:
            return
        self._declared = True

        by_scope = sorted(self.signals, key=lambda item: item[0].scope)
        for path, group in itertools.groupby(by_scope, key=lambda item: item[0].scope):
            for module in path:
                self.f.write(f"$scope module {module} $end\n")
            for sig, vid in group:
                kind = "reg" if sig.is_latch_output else "wire"
                self.f.write(f"$var {kind} 1 {vid} {sig.name} $end\n")
            self.f.write("$upscope $end\n" * len(path))

        self.f.write("$enddefinitions $end\n")

    def _dump_initial(self, timestamp: int = 0):
        """Declare the signals and write every value of cycle 0."""
        if not self.f:
            return
        self._declare()
        self.f.write(f"#{timestamp}\n$dumpvars\n")
        for sig, vid in self.signals:
            self._write_value(sig, vid)
        self.f.write("$end\n")

    def _dump(self, timestamp: int):
        """Write the values that changed in cycle ``timestamp``."""
        if not self.f:
            return
        self.f.write(f"#{timestamp}\n")
        for sig, vid in self.signals:
            if self._last_values[vid] != int(sig.value):
                self._write_value(sig, vid)

    def _write_value(self, sig: _IVCDSignal, vid: str):
        val = int(sig.value)
        self._last_values[vid] = val
        self.f.write(f"{val}{vid}\n")
