from hwsim import *

a, b = SignalRef("A"), SignalRef("B")
xor = FunctionDef("xor", ["A", "B"], Or(And(a, Not(b)), And(Not(a), b)))

circuit = Circuit(
    "half_adder",
    inputs=["X", "Y"],
    outputs=["Sum", "Carry"],
    definitions=[xor],
    updates=[
        Update("Sum", Apply("xor", [SignalRef("X"), SignalRef("Y")])),
        Update("Carry", And(SignalRef("X"), SignalRef("Y"))),
    ],
    siminputs=[
        Trace.from_bits("X", "0101"),
        Trace.from_bits("Y", "0011"),
    ],
)


if __name__ == "__main__":
    for trace in run_simulation(circuit):
        print(trace)

# Example console output:
# Sum = 0110
# Carry = 0001
