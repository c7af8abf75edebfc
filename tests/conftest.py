from __future__ import annotations

import pytest

from enigma.core import Alphabet, Permutation, RotorPool
from enigma.core.rotors import FixedRotor, MovingRotor, Reflector
from enigma.frontend.config import load_default_config

# Enigma I / M4 wirings in cycle notation
ROTOR_I = "(AELTPHQXRU) (BKNW) (CMOY) (DFG) (IV) (JZ) (S)"
ROTOR_II = "(FIXVYOMW) (CDKLHUP) (ESZ) (BJ) (GR) (NT) (A) (Q)"
ROTOR_III = "(ABDHPEJT) (CFLVMZOYQIRWUKXSG) (N)"
BETA = "(ALBEVFCYODJWUGNMQTZSKPR) (HIX)"
REFLECTOR_B = "(AE) (BN) (CK) (DQ) (FU) (GY) (HW) (IJ) (LO) (MP) (RX) (SZ) (TV)"


@pytest.fixture
def upper() -> Alphabet:
    return Alphabet()


@pytest.fixture
def pool(upper) -> RotorPool:
    return RotorPool(
        [
            Reflector("B", Permutation(REFLECTOR_B, upper)),
            FixedRotor("Beta", Permutation(BETA, upper)),
            MovingRotor("I", Permutation(ROTOR_I, upper), "Q"),
            MovingRotor("II", Permutation(ROTOR_II, upper), "E"),
            MovingRotor("III", Permutation(ROTOR_III, upper), "V"),
        ]
    )


@pytest.fixture
def default_config():
    return load_default_config()
