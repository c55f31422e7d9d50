import pytest

from lcdwidgets.bitfield import (
    bit,
    bit_get,
    bitmask,
    flip,
    get_field,
    mask,
    prep,
    set_field,
    single_bit_get,
)


@pytest.mark.parametrize("n", [0, 1, 7, 15, 31, 40])
def test_bitmask_and_bit(n):
    assert bitmask(n) + 1 == bit(n)
    assert bin(bitmask(n)).count("1") == n
    assert bin(bit(n)).count("1") == 1


@pytest.mark.parametrize("start,length", [(0, 4), (4, 4), (3, 5), (16, 8)])
def test_mask_is_shifted_bitmask(start, length):
    m = mask(start, length)
    assert m >> start == bitmask(length)
    assert m & bitmask(start) == 0


@pytest.mark.parametrize("x,start,length", [(0xFF, 2, 3), (0, 5, 4), (0x1234, 8, 8)])
def test_prep_stays_within_mask(x, start, length):
    assert prep(x, start, length) & ~mask(start, length) == 0
    assert get_field(prep(x, start, length), start, length) == x & bitmask(length)


@pytest.mark.parametrize(
    "to,value,start,length",
    [(0xFF, 0, 4, 4), (0, 0x3F, 2, 3), (0xABCD, 0x5, 8, 4), (0xFFFFFFFF, 0x12, 27, 5)],
)
def test_set_then_get_round_trip(to, value, start, length):
    result = set_field(to, value, start, length)
    assert get_field(result, start, length) == value & bitmask(length)
    assert result & ~mask(start, length) == to & ~mask(start, length)


def test_set_field_clears_upper_nibble():
    assert set_field(0xFF, 0, 4, 4) == 0x0F


@pytest.mark.parametrize("y,m", [(0, 0xFF), (0xAA, 0x0F), (0x1234, 0x1234)])
def test_flip_is_its_own_inverse(y, m):
    assert flip(flip(y, m), m) == y
    assert flip(y, m) & ~m == y & ~m


def test_bit_get_selects_common_bits():
    assert bit_get(0b1010, 0b0110) == 0b0010


@pytest.mark.parametrize("i", [0, 3, 15])
def test_single_bit_get(i):
    assert single_bit_get(bit(i), i) == bit(i)
    assert single_bit_get(0, i) == 0
    assert single_bit_get(bitmask(16), i) == bit(i)


def test_negative_lengths_and_positions_raise():
    with pytest.raises(ValueError):
        bit(-1)
    with pytest.raises(ValueError):
        bitmask(-2)
    with pytest.raises(ValueError):
        get_field(0xFF, -1, 4)
    with pytest.raises(ValueError):
        mask(-3, 2)