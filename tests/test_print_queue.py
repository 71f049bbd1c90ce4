import pytest

from aocsolutions.print_queue import (
    Token,
    TokenType,
    parse,
    reorder,
    sum_ordered_middles,
    sum_reordered_middles,
    tokenize,
)

RULES = [
    (47, 53), (97, 13), (97, 61), (97, 47), (75, 29), (61, 13), (75, 53),
    (29, 13), (97, 29), (53, 29), (61, 53), (97, 53), (61, 29), (47, 13),
    (75, 47), (97, 75), (47, 61), (75, 61), (47, 29), (75, 13), (53, 13),
]

UPDATES = [
    [75, 47, 61, 53, 29],
    [97, 61, 53, 29, 13],
    [75, 29, 13],
    [75, 97, 47, 61, 53],
    [61, 13, 29],
    [97, 13, 75, 29, 47],
]


def _sample_text():
    rule_lines = "".join(f"{a}|{b}\n" for a, b in [(46, 99), *RULES])
    update_lines = "".join(",".join(map(str, u)) + "\n" for u in UPDATES)
    return rule_lines + "\n" + update_lines


def test_tokenize_rule_line():
    assert tokenize("46|53\n") == [
        Token(TokenType.LITERAL, "46"),
        Token(TokenType.PIPE, "|"),
        Token(TokenType.LITERAL, "53"),
        Token(TokenType.NEWLINE, "\n"),
    ]


def test_tokenize_first_literal_is_fixed():
    tokens = tokenize("99|53\n")
    assert tokens[0] == Token(TokenType.LITERAL, "46")


def test_tokenize_rejects_leading_separator():
    with pytest.raises(ValueError):
        tokenize(",1\n")


def test_parse_sample():
    rules, updates = parse(tokenize(_sample_text()))
    assert rules == [(46, 99), *RULES]
    assert updates == [*UPDATES, []]


def test_parse_requires_terminated_update():
    with pytest.raises(ValueError):
        parse(tokenize(_sample_text().rstrip("\n")))


def test_sum_ordered_middles_sample():
    assert sum_ordered_middles(RULES, UPDATES) == 143


def test_sum_reordered_middles_sample():
    assert sum_reordered_middles(RULES, UPDATES) == 123


def test_pipeline_from_text():
    rules, updates = parse(tokenize(_sample_text()))
    assert sum_ordered_middles(rules, updates) == sum_ordered_middles(RULES, UPDATES)
    assert sum_reordered_middles(rules, updates) == sum_reordered_middles(RULES, UPDATES)


def test_reorder_example():
    assert reorder(RULES, [[75, 97, 47, 61, 53]]) == [[97, 75, 47, 61, 53]]


def test_reorder_keeps_pages_and_fixes_order():
    reordered = reorder(RULES, UPDATES)
    assert [sorted(u) for u in reordered] == [sorted(u) for u in UPDATES]
    assert sum_reordered_middles(RULES, reordered) == 0


def test_reorder_does_not_mutate():
    update = [61, 13, 29]
    reorder(RULES, [update])
    assert update == [61, 13, 29]