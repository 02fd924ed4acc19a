import pytest

from LFSR import LFSR


def test_clock_shifts_towards_msb_and_feeds_back_parity():
    reg = LFSR(5, [1, 4], clock_bit=2, state=0b00010)
    # taps 1 and 4: bit1=1, bit4=0 -> feedback 1
    reg.clock()
    assert reg.state == 0b00101


def test_clock_drops_msb():
    reg = LFSR(4, [0], clock_bit=0, state=0b1000)
    # bit0=0 -> feedback 0, MSB falls off
    reg.clock()
    assert reg.state == 0


def test_zero_state_stays_zero():
    reg = LFSR(19, [13, 16, 17, 18], clock_bit=8)
    for _ in range(50):
        reg.clock()
    assert reg.state == 0


def test_bit_accessors():
    reg = LFSR(8, [7], clock_bit=3, state=0b10001000)
    assert reg.bit(3) == 1
    assert reg.control() == 1
    assert reg.msb() == 1
    assert reg.bit(0) == 0
    assert reg.bits() == [False, False, False, True, False, False, False, True]


def test_xor_lsb_and_zero():
    reg = LFSR(8, [7], clock_bit=0)
    reg.xor_lsb(1)
    assert reg.state == 1
    reg.xor_lsb(1)
    assert reg.state == 0
    reg.state = 0xFF
    reg.zero()
    assert reg.state == 0


def test_seed_is_masked_to_length():
    reg = LFSR(4, [3], clock_bit=0, state=0xFF)
    assert reg.state == 0xF


def test_length_is_preserved():
    reg = LFSR(23, [7, 20, 21, 22], clock_bit=10, state=(1 << 23) - 1)
    for _ in range(200):
        reg.clock()
        assert len(reg.bits()) == 23
        assert reg.state < (1 << 23)


@pytest.mark.parametrize("taps, clock_bit", [([5], 0), ([0], 5), ([-1], 0)])
def test_out_of_range_geometry_is_rejected(taps, clock_bit):
    with pytest.raises(AssertionError):
        LFSR(5, taps, clock_bit)
