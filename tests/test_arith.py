import pytest

from nestedfrac.core.arith import gcd, lcm, ratio


@pytest.mark.parametrize(
    "a, b, expected",
    [
        (12, 18, 6),
        (-12, 18, 6),
        (12, -18, 6),
        (7, 13, 1),
        (0, 5, 5),
        (5, 0, 5),
        (0, 0, 0),
    ],
)
def test_gcd_is_non_negative(a, b, expected):
    assert gcd(a, b) == expected


def test_lcm():
    assert lcm(4, 6) == 12
    assert lcm(-4, 6) == 12
    assert lcm(3, 5) == 15
    assert lcm(7, 7) == 7
    assert lcm(0, 9) == 0


def test_ratio_keeps_signs_in_place():
    assert ratio(4, 6) == (2, 3)
    assert ratio(-4, 6) == (-2, 3)
    assert ratio(4, -6) == (2, -3)
    assert ratio(0, 7) == (0, 1)
    assert ratio(7, 0) == (1, 0)


def test_ratio_of_zeros_is_unchanged():
    assert ratio(0, 0) == (0, 0)
