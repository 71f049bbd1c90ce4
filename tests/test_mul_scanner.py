import pytest

from aocsolutions.mul_scanner import (
    Token,
    TokenType,
    evaluate,
    find_mul,
    scan_products,
    sum_products,
    tokenize,
)

PLAIN = "xmul(2,4)%&mul[3,7]!@^do_not_mul(5,5)+mul(32,64]then(mul(11,8)mul(8,5))"
TOGGLED = "xmul(2,4)&mul[3,7]!^don't()_mul(5,5)+mul(32,64](mul(11,8)undo()?mul(8,5))"


def test_find_mul_parses_operands():
    assert find_mul("mul(2,4)") == (2, 4)


@pytest.mark.parametrize("text", ["mux(2,4)", "mul(2 ,4)", "mul(2,4]", "mul[2,4)"])
def test_find_mul_rejects_malformed(text):
    assert find_mul(text) is None


def test_find_mul_empty_operand_raises():
    with pytest.raises(ValueError):
        find_mul("mul(,4)")


def test_scan_products_plain_example():
    pairs = scan_products(PLAIN)
    assert pairs == [(2, 4), (5, 5), (11, 8), (8, 5)]
    assert sum_products(pairs) == 161


def test_scan_products_respects_toggles():
    assert scan_products(TOGGLED) == [(2, 4), (8, 5)]


def test_evaluate_toggled_example():
    assert evaluate(tokenize(TOGGLED)) == 48


def test_both_scanners_agree_on_toggled_example():
    assert evaluate(tokenize(TOGGLED)) == sum_products(scan_products(TOGGLED))


def test_tokenize_simple_call():
    assert tokenize("xmul(2,4)") == [
        Token(TokenType.LITERAL, "mul"),
        Token(TokenType.LEFT_PAREN, "("),
        Token(TokenType.LITERAL, "2"),
        Token(TokenType.COMMA, ","),
        Token(TokenType.LITERAL, "4"),
        Token(TokenType.RIGHT_PAREN, ")"),
    ]


def test_tokenize_literal_before_minus_keeps_preceding_char():
    assert tokenize("a1-2") == [
        Token(TokenType.LITERAL, "a1"),
        Token(TokenType.MINUS, "-"),
    ]


def test_evaluate_matches_scan_on_single_call():
    assert evaluate(tokenize("xmul(2,4)")) == sum_products(scan_products("xmul(2,4)"))


def test_evaluate_disabled_call_contributes_nothing():
    disabled = tokenize("xdon't()mul(2,4)")
    enabled = tokenize("xdo()mul(2,4)")
    assert evaluate(disabled) == 0
    assert evaluate(enabled) == evaluate(tokenize("xmul(2,4)"))