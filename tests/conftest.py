import random

import pytest


def twos_bytes(i, byteorder='little'):
    """Minimal two's-complement encoding of a python int."""
    return i.to_bytes((i + (i < 0)).bit_length() // 8 + 1, byteorder, signed=True)


@pytest.fixture
def rng():
    return random.Random(100)


@pytest.fixture
def twos():
    return twos_bytes
