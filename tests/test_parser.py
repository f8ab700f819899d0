import logging

import pytest

from nestedfrac import (
    DenominatorOverflow,
    DivisionByZero,
    FractionSyntaxError,
    InvalidOperandType,
    NestedFraction,
    NumeratorOverflow,
    parse,
)
from nestedfrac.core.constants import MAX_NESTING_DEPTH
from nestedfrac.core.parser import Parser


def test_parse_flat():
    f = parse("(1 / 2)")
    assert (f.num, f.denom) == (1, 2)


def test_parse_keeps_structure():
    f = parse("(2 / -4)")
    assert (f.num, f.denom) == (2, -4)
    assert not f.is_canonical


def test_parse_nested_denominator():
    f = parse("(1 / (1 / 3))")
    assert f.num == 1
    assert isinstance(f.denom, NestedFraction)
    assert (f.denom.num, f.denom.denom) == (1, 3)
    assert f.value() == 3


def test_parse_nested_both_sides():
    f = parse("((1 / 2) / (1 / 2))")
    assert f.depth == 1
    r = f.reduce()
    assert (r.num, r.denom) == (1, 1)


def test_parse_deep_nesting():
    f = parse("(((1 / 2) / 3) / (4 / (5 / (6 / 7))))")
    assert f.depth == 3


@pytest.mark.parametrize(
    "text",
    [
        "(1/2)",
        "  (1 / 2)  ",
        "(\t1\n/\n2 )",
        "( 1 /2)",
        "\n(1/ 2)\n",
    ],
)
def test_whitespace_is_insignificant(text):
    f = parse(text)
    assert (f.num, f.denom) == (1, 2)


def test_parse_negative_numbers():
    f = parse("(-1 / (-2 / -3))")
    assert f.num == -1
    assert (f.denom.num, f.denom.denom) == (-2, -3)


def test_parse_leading_zeros():
    f = parse("(007 / 010)")
    assert (f.num, f.denom) == (7, 10)


@pytest.mark.parametrize(
    "text, offset, reason",
    [
        ("(1/2", 4, 'missing ")"'),
        ("", 0, 'missing "("'),
        ("1 / 2", 0, 'missing "("'),
        ("()", 1, "expected a number or a fraction in the numerator"),
        ("(/2)", 1, "expected a number or a fraction in the numerator"),
        ("(1)", 2, 'expected "/"'),
        ("(1 2)", 3, 'expected "/"'),
        ("(1//2)", 3, "expected a number or a fraction in the denominator"),
        ("(1/)", 3, "expected a number or a fraction in the denominator"),
        ("(1/2/3)", 4, 'missing ")"'),
        ("(- 1/2)", 2, 'expected digits after "-"'),
        ("(1/-)", 4, 'expected digits after "-"'),
        ("(1/2))", 5, "unexpected trailing input"),
        ("(1/2) x", 6, "unexpected trailing input"),
        ("(1.5/2)", 2, 'expected "/"'),
        ("(+1/2)", 1, "expected a number or a fraction in the numerator"),
        ("(1e3/2)", 2, 'expected "/"'),
        ("((1/2)/(3/4)", 12, 'missing ")"'),
    ],
)
def test_syntax_errors(text, offset, reason):
    with pytest.raises(FractionSyntaxError) as exc_info:
        parse(text)
    err = exc_info.value
    assert err.offset == offset
    assert err.reason == reason
    assert err.text == text


def test_syntax_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse("(1/2")


def test_syntax_error_renders_caret():
    with pytest.raises(FractionSyntaxError) as exc_info:
        parse("(1/2")
    lines = str(exc_info.value).split("\n")
    assert lines[0].startswith('missing ")"')
    assert lines[1] == "(1/2"
    assert lines[2] == "    ^"


def test_zero_denominator_literal():
    with pytest.raises(DivisionByZero):
        parse("(1 / 0)")
    with pytest.raises(DivisionByZero):
        parse("((1 / 2) / -0)")


def test_zero_valued_nested_denominator_parses():
    f = parse("(1 / (0 / 2))")
    assert f.denom.num == 0


def test_integer_overflow():
    with pytest.raises(NumeratorOverflow):
        parse("(9223372036854775808 / 1)")
    with pytest.raises(DenominatorOverflow):
        parse("(1 / -9223372036854775809)")
    f = parse("(-9223372036854775808 / 9223372036854775807)")
    assert f.num == -(2**63)


def test_huge_integer_literals_overflow():
    with pytest.raises(NumeratorOverflow):
        parse("(" + "9" * 5000 + " / 1)")
    with pytest.raises(DenominatorOverflow):
        parse("(1 / -" + "9" * 5000 + ")")
    with pytest.raises(NumeratorOverflow):
        parse("(" + "1" + "0" * 19 + " / 1)")


def test_leading_zeros_do_not_overflow():
    f = parse("(" + "0" * 5000 + "7 / -" + "0" * 30 + "9223372036854775808)")
    assert (f.num, f.denom) == (7, -(2**63))


def nested_text(levels: int) -> str:
    """``levels`` fractions nested in the denominator, the result has depth ``levels - 1``"""
    return "(1 / " * levels + "2" + ")" * levels


def test_nesting_up_to_the_limit():
    f = parse(nested_text(MAX_NESTING_DEPTH + 1))
    assert f.depth == MAX_NESTING_DEPTH
    assert f.reduce().is_canonical

    left = parse("(" * (MAX_NESTING_DEPTH + 1) + "3" + " / 1)" * (MAX_NESTING_DEPTH + 1))
    assert left.depth == MAX_NESTING_DEPTH
    r = left.reduce()
    assert (r.num, r.denom) == (3, 1)


def test_nesting_too_deep():
    text = nested_text(MAX_NESTING_DEPTH + 2)
    with pytest.raises(FractionSyntaxError) as exc_info:
        parse(text)
    assert exc_info.value.reason == "nesting too deep"
    assert exc_info.value.offset == 5 * (MAX_NESTING_DEPTH + 1)

    with pytest.raises(FractionSyntaxError, match="nesting too deep"):
        parse(nested_text(2000))


def test_parse_rejects_non_strings():
    with pytest.raises(InvalidOperandType):
        parse(b"(1 / 2)")  # type: ignore[arg-type]


def test_parser_position_after_parse():
    parser = Parser("  (1 / 2)  ")
    parser.parse()
    assert parser.pos == len(parser.text)


def test_classmethod_parse():
    f = NestedFraction.parse("((1 / 2) / 3)")
    assert str(f) == "((1 / 2) / 3)"


def test_parse_logs_depth(caplog):
    with caplog.at_level(logging.DEBUG, logger="nestedfrac"):
        parse("(1 / (1 / 3))")
    assert any("depth 1" in record.getMessage() for record in caplog.records)
