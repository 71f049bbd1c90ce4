import pytest

from aocsolutions.claw import (
    PRIZE_OFFSET,
    ClawMachine,
    Token,
    TokenType,
    min_tokens_exact,
    min_tokens_search,
    parse,
    tokenize,
    total_exact,
    total_search,
)


def machine_text(ax, ay, bx, by, px, py):
    return (
        f"Button A: X+{ax}, Y+{ay}\n"
        f"Button B: X+{bx}, Y+{by}\n"
        f"Prize: X={px}, Y={py}\n"
    )


def built_machine(presses_a, presses_b, a=(94, 34), b=(22, 67)):
    return ClawMachine(
        a[0],
        a[1],
        b[0],
        b[1],
        presses_a * a[0] + presses_b * b[0],
        presses_a * a[1] + presses_b * b[1],
    )


EXAMPLE = machine_text(94, 34, 22, 67, 8400, 5400)


def test_tokenize_drops_first_character():
    assert tokenize("a:b") == [
        Token(TokenType.COLON, ":"),
        Token(TokenType.LITERAL, "b"),
    ]


def test_tokenize_literals_between_separators():
    assert tokenize("ab c") == [
        Token(TokenType.LITERAL, "b"),
        Token(TokenType.SPACE, " "),
        Token(TokenType.LITERAL, "c"),
    ]


def test_tokenize_machine_token_count():
    tokens = tokenize(EXAMPLE)
    assert len(tokens) == 41
    assert tokens[-1] == Token(TokenType.LITERAL, "")


@pytest.mark.parametrize("text", ["", " x", "\nabc"])
def test_tokenize_rejects_bad_start(text):
    with pytest.raises(ValueError):
        tokenize(text)


def test_parse_single_machine():
    assert parse(tokenize(EXAMPLE)) == [ClawMachine(94, 34, 22, 67, 8400, 5400)]


def test_parse_without_trailing_newline():
    assert parse(tokenize(EXAMPLE.rstrip("\n"))) == [
        ClawMachine(94, 34, 22, 67, 8400, 5400)
    ]


def test_parse_several_machines():
    text = EXAMPLE + "\n" + machine_text(26, 66, 67, 21, 12748, 12176)
    assert parse(tokenize(text)) == [
        ClawMachine(94, 34, 22, 67, 8400, 5400),
        ClawMachine(26, 66, 67, 21, 12748, 12176),
    ]


def test_parse_with_offset():
    (machine,) = parse(tokenize(EXAMPLE), PRIZE_OFFSET)
    assert machine.prize_x == 8400 + PRIZE_OFFSET
    assert machine.prize_y == 5400 + PRIZE_OFFSET
    assert (machine.a_x, machine.b_y) == (94, 67)


def test_parse_too_short():
    with pytest.raises(ValueError):
        parse(tokenize("Prize: X=1"))


@pytest.mark.parametrize("presses", [(80, 40), (0, 5), (3, 0), (99, 1)])
def test_search_and_exact_find_built_solution(presses):
    machine = built_machine(*presses)
    expected = 3 * presses[0] + presses[1]
    assert min_tokens_search(machine) == expected
    assert min_tokens_exact(machine) == expected


def test_search_limits_a_presses():
    machine = built_machine(150, 1)
    assert min_tokens_search(machine) is None
    assert min_tokens_exact(machine) == 3 * 150 + 1


def test_unsolvable_machine():
    machine = ClawMachine(2, 3, 4, 5, 7, 1)
    assert min_tokens_search(machine) is None
    assert min_tokens_exact(machine) is None


def test_parallel_buttons_are_singular():
    with pytest.raises(ZeroDivisionError):
        min_tokens_exact(ClawMachine(1, 1, 2, 2, 3, 3))


def test_totals_skip_unsolvable():
    machines = [
        built_machine(80, 40),
        ClawMachine(2, 3, 4, 5, 7, 1),
        built_machine(3, 0),
    ]
    expected = (3 * 80 + 40) + (3 * 3 + 0)
    assert total_search(machines) == expected
    assert total_exact(machines) == expected


def test_exact_handles_huge_presses():
    presses_a, presses_b = 10**11 + 7, 3 * 10**11
    machine = built_machine(presses_a, presses_b)
    assert total_exact([machine]) == 3 * presses_a + presses_b