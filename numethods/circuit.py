"""Mesh currents of a three-loop resistor circuit solved with the LU solver."""

from __future__ import annotations

from collections.abc import Sequence

from numethods.linear_system import EquationSystem

# Loop 1: R1 = 4 ohm, R2 = 1 ohm,               V1 = 5 V
# Loop 2: R2 = 3 ohm, R3 = 1 ohm, R4 = 2 ohm,   V2 = 3 V
# Loop 3: R4 = 2 ohm, R5 = 5 ohm,               V3 = 2 V
RESISTANCE = (
    (5.0, -1.0, 0.0),
    (-1.0, 6.0, -2.0),
    (0.0, -2.0, 7.0),
)

VOLTAGE = (5.0, 3.0, 2.0)


def mesh_currents() -> list[float]:
    """Return the current flowing in each loop, in amperes."""
    return EquationSystem(RESISTANCE, VOLTAGE).solve_lu()


def main(argv: Sequence[str] | None = None) -> int:
    """Print the mesh currents of the sample circuit."""
    print("Mesh currents:")
    for current in mesh_currents():
        print(f"{current:g} A")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())