import pytest

from ftformat.numconv import atoi, itoa, itoa_base, numlen, numlen_u

HEX = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"
DEC = "0123456789"

SAMPLES = [0, 1, -1, 7, -7, 42, -42, 100, 2147483647, -2147483648, 123456789]


@pytest.mark.parametrize("n", SAMPLES)
def test_itoa_round_trip(n):
    assert int(itoa(n)) == n


@pytest.mark.parametrize("n", SAMPLES)
def test_numlen_matches_itoa_length(n):
    assert numlen(n) == len(itoa(n))


def test_itoa_zero():
    assert itoa(0) == "0"


def test_itoa_int_min():
    assert itoa(-2147483648) == "-2147483648"


@pytest.mark.parametrize("n", [0, 1, 15, 16, 255, 4294967295, 2**64 - 1])
def test_itoa_base_hex_round_trip(n):
    assert int(itoa_base(n, HEX), 16) == n
    assert itoa_base(n, HEX_UPPER) == itoa_base(n, HEX).upper()


@pytest.mark.parametrize("n", [0, 9, 10, 4294967295])
def test_itoa_base_decimal_matches_itoa(n):
    assert itoa_base(n, DEC) == itoa(n)


def test_itoa_base_wraps_negative_to_unsigned_long():
    assert int(itoa_base(-1, HEX), 16) == 2**64 - 1


def test_itoa_base_binary_round_trip():
    assert int(itoa_base(37, "01"), 2) == 37


def test_itoa_base_rejects_short_base():
    with pytest.raises(ValueError):
        itoa_base(5, "0")


@pytest.mark.parametrize("n", [0, 1, 255, 65536, 2**64 - 1])
@pytest.mark.parametrize("radix", [2, 10, 16])
def test_numlen_u_matches_itoa_base(n, radix):
    assert numlen_u(n, radix) == len(itoa_base(n, HEX[:radix]))


def test_numlen_u_rejects_bad_radix():
    with pytest.raises(ValueError):
        numlen_u(10, 1)


@pytest.mark.parametrize("n", SAMPLES)
def test_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_atoi_skips_whitespace_and_stops_at_non_digit():
    assert atoi(" \t\n\v\f\r-42abc") == -42
    assert atoi("+42 7") == 42


def test_atoi_no_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("-") == 0
    assert atoi("") == 0


def test_atoi_single_sign_only():
    assert atoi("+-5") == 0


def test_atoi_wraps_past_int_max():
    assert atoi("2147483648") == -2147483648
    assert atoi("-2147483648") == -2147483648