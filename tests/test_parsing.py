import pytest

from pushswap.parsing import (
    InputError,
    atoi32,
    check_duplicates,
    check_tokens,
    is_number,
    needs_sorting,
    parse_int,
    parse_stack,
    split_arguments,
)


@pytest.mark.parametrize("text", ["42", "-42", "+7", "2147483647", "-2147483647"])
def test_atoi32_plain_numbers(text):
    assert atoi32(text) == int(text)


def test_atoi32_skips_whitespace_and_stops_at_garbage():
    assert atoi32(" \t\n-42abc") == -42


def test_atoi32_wraps_at_the_boundary():
    assert atoi32("2147483648") == -2147483648


def test_atoi32_negative_overflow_gives_zero():
    assert atoi32("-2147483648") == 0


def test_atoi32_positive_overflow_gives_minus_one():
    assert atoi32("99999999999") == -1


def test_atoi32_double_sign_gives_zero():
    assert atoi32("+-5") == atoi32("--5") == 0


@pytest.mark.parametrize("token", ["12", "-12", "+12", "0", "-", ""])
def test_is_number_accepts(token):
    assert is_number(token) is True


@pytest.mark.parametrize("token", ["1a", "--1", "1-", "a", "1 2", "١٢"])
def test_is_number_rejects(token):
    assert is_number(token) is False


def test_split_arguments_joins_and_splits():
    assert split_arguments(["3 2", "1", "  5  "]) == ["3", "2", "1", "5"]


def test_split_arguments_empty():
    assert split_arguments([]) == []
    assert split_arguments(["   "]) == []


def test_check_tokens_rejects_letters():
    with pytest.raises(InputError):
        check_tokens(["1", "x2"])


def test_check_tokens_rejects_long_tokens():
    with pytest.raises(InputError):
        check_tokens(["+00000000001"])


def test_check_tokens_accepts_eleven_characters():
    check_tokens(["-2147483648"])
    assert parse_int("-2147483648") == -2147483648


@pytest.mark.parametrize("value", [0, 1, -1, 2147483647, -2147483648, 12345])
def test_parse_int_round_trip(value):
    assert parse_int(str(value)) == value


def test_parse_int_plus_sign():
    assert parse_int("+17") == 17


@pytest.mark.parametrize("token", ["2147483648", "-2147483649", "99999999999"])
def test_parse_int_out_of_range(token):
    with pytest.raises(InputError):
        parse_int(token)


def test_input_error_message():
    assert str(InputError()) == "Error"
    assert isinstance(InputError(), ValueError)


def test_check_duplicates():
    check_duplicates([3, 1, 2])
    with pytest.raises(InputError):
        check_duplicates([3, 1, 3])


def test_parse_stack_keeps_order():
    assert parse_stack(["3 2", "1", "-5"]) == [3, 2, 1, -5]


def test_parse_stack_empty():
    assert parse_stack(["  "]) == []


def test_parse_stack_rejects_duplicates():
    with pytest.raises(InputError):
        parse_stack(["1 2", "+1"])


def test_parse_stack_rejects_tabs_inside_tokens():
    with pytest.raises(InputError):
        parse_stack(["1\t2"])


def test_parse_stack_rejects_overflow():
    with pytest.raises(InputError):
        parse_stack(["1", "2147483648"])


def test_needs_sorting():
    assert needs_sorting([1, 2, 3]) is False
    assert needs_sorting([2, 1, 3]) is True
    assert needs_sorting([5]) is False
    assert needs_sorting([]) is False


def test_needs_sorting_rejects_duplicates():
    with pytest.raises(InputError):
        needs_sorting([1, 2, 2])