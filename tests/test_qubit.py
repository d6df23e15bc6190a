import pytest

from qecsim.qubit import Qubit


class FixedRng:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_default_state_is_zero():
    q = Qubit()
    assert (q.zero, q.one) == (1 + 0j, 0j)


@pytest.mark.parametrize("value", [0.0, 0.3, 0.999])
def test_measure_zero_state_is_false(value):
    assert Qubit().measure(FixedRng(value)) is False


def test_measure_one_state_is_true():
    q = Qubit(zero=0j, one=1 + 0j)
    assert q.measure(FixedRng(0.5)) is True


def test_measure_with_default_rng_on_zero_state():
    q = Qubit()
    assert all(not q.measure() for _ in range(50))


def test_measure_does_not_change_state():
    q = Qubit(zero=0j, one=1 + 0j)
    before = q.copy()
    q.measure(FixedRng(0.2))
    assert q == before


def test_bit_flip_twice_is_identity():
    q = Qubit(zero=0.6 + 0j, one=0.8j)
    original = q.copy()
    q.bit_flip()
    assert q != original
    q.bit_flip()
    assert q == original


def test_bit_flip_swaps_amplitudes():
    q = Qubit()
    q.bit_flip()
    assert (q.zero, q.one) == (0j, 1 + 0j)


def test_phase_flip_leaves_zero_state_unchanged():
    q = Qubit()
    q.phase_flip()
    assert q == Qubit()


def test_phase_flip_negates_one_amplitude():
    q = Qubit(zero=0.6 + 0j, one=0.8 + 0.1j)
    q.phase_flip()
    assert q.zero == 0.6 + 0j
    assert q.one == -(0.8 + 0.1j)


def test_copy_is_independent():
    q = Qubit()
    c = q.copy()
    c.bit_flip()
    assert q == Qubit()
    assert c != q