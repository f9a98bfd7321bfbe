import logging

from hwsim import *

# Two-bit counter: B0 toggles every cycle, B1 toggles when B0' is set.
a, b = SignalRef("A"), SignalRef("B")
xor = FunctionDef("xor", ["A", "B"], Or(And(a, Not(b)), And(Not(a), b)))

circuit = Circuit(
    "counter",
    inputs=["Reset"],
    outputs=["Q0", "Q1"],
    latches=["B0", "B1"],
    definitions=[xor],
    updates=[
        Update("B0", And(Not(SignalRef("Reset")), Not(SignalRef("B0'")))),
        Update("B1", And(Not(SignalRef("Reset")), Apply("xor", [SignalRef("B1'"), SignalRef("B0'")]))),
        Update("Q0", SignalRef("B0'")),
        Update("Q1", SignalRef("B1'")),
    ],
    siminputs=[Trace.from_bits("Reset", "100000100")],
)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    vcd = VCDWriter()
    vcd.open("counter.vcd")
    Simulator(circuit, SimConfig(monitor=LoggingMonitor(), vcd=vcd)).run()
    vcd.close()

# Example console output (truncated):
# Starting simulation of circuit counter
# Environment after cycle 0: Reset=1 B0'=0 B1'=0 B0=0 B1=0 Q0=0 Q1=0
# ...
# Q0 = 001010101
# Q1 = 000110000
