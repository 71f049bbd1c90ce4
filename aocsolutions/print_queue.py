"""Print queue: page ordering rules and the updates that follow or break them."""

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from itertools import combinations, combinations_with_replacement

_I32 = re.compile(r"[+-]?[0-9]+")
_FIRST_LITERAL = "46"


class TokenType(Enum):
    """Kinds of tokens produced by tokenize."""

    LITERAL = auto()
    COMMA = auto()
    PIPE = auto()
    NEWLINE = auto()


@dataclass(frozen=True)
class Token:
    """A token and the text it was made from."""

    token_type: TokenType
    value: str


_SEPARATORS = {
    ",": TokenType.COMMA,
    "|": TokenType.PIPE,
    "\n": TokenType.NEWLINE,
}


def tokenize(text: str) -> list[Token]:
    """Split text into separators and the literals between them.

    The first literal is always "46" and takes the place of the first two
    characters of the text; text after the last separator is dropped. A
    separator as the very first character is an error.
    """
    tokens = [Token(TokenType.LITERAL, _FIRST_LITERAL)]
    last = 1
    for i, char in enumerate(text):
        kind = _SEPARATORS.get(char)
        if kind is None:
            continue
        if i == 0:
            raise ValueError("input may not start with a separator")
        if last < i - 1:
            tokens.append(Token(TokenType.LITERAL, text[last + 1:i]))
        tokens.append(Token(kind, char))
        last = i
    return tokens


def _parse_i32(value: str) -> int | None:
    value = value.strip()
    if not _I32.fullmatch(value):
        return None
    number = int(value)
    if not -(2**31) <= number < 2**31:
        return None
    return number


def _token_at(tokens: Sequence[Token], index: int) -> Token:
    if index >= len(tokens):
        raise ValueError("unexpected end of input")
    return tokens[index]


def _is_rule(tokens: Sequence[Token], index: int) -> bool:
    return (
        _token_at(tokens, index).token_type is TokenType.LITERAL
        and _token_at(tokens, index + 1).token_type is TokenType.PIPE
        and _token_at(tokens, index + 2).token_type is TokenType.LITERAL
    )


def parse(tokens: Sequence[Token]) -> tuple[list[tuple[int, int]], list[list[int]]]:
    """Read the ordering rules, then the updates, from a token stream.

    Each update line must end with a line break; the list of updates always
    ends with an empty one.
    """
    rules: list[tuple[int, int]] = []
    updates: list[list[int]] = [[]]
    finding_rules = True
    i = 0
    while i < len(tokens):
        if finding_rules:
            if _is_rule(tokens, i):
                before = _parse_i32(tokens[i].value)
                after = _parse_i32(tokens[i + 2].value)
                if before is not None and after is not None:
                    rules.append((before, after))
                else:
                    finding_rules = False
                i += 4
            else:
                finding_rules = False
                i += 1
            continue
        while (token := _token_at(tokens, i)).token_type is not TokenType.NEWLINE:
            if token.token_type is TokenType.LITERAL:
                page = _parse_i32(token.value)
                if page is not None:
                    updates[-1].append(page)
            i += 1
        updates.append([])
        i += 1
    return rules, updates


def _rule_set(rules: Iterable[Sequence[int]]) -> set[tuple[int, int]]:
    return {(before, after) for before, after in rules}


def _violates(rule_set: set[tuple[int, int]], update: Sequence[int]) -> bool:
    return any(
        (later, earlier) in rule_set
        for earlier, later in combinations_with_replacement(update, 2)
    )


def _middle_sum(updates: Iterable[Sequence[int]]) -> int:
    return sum(update[len(update) // 2] for update in updates if update)


def sum_ordered_middles(
    rules: Iterable[Sequence[int]], updates: Iterable[Sequence[int]]
) -> int:
    """Sum the middle page of every update that breaks no rule."""
    rule_set = _rule_set(rules)
    return _middle_sum(update for update in updates if not _violates(rule_set, update))


def reorder(
    rules: Sequence[Sequence[int]], updates: Iterable[Sequence[int]]
) -> list[list[int]]:
    """Return copies of the updates with pages swapped until no rule is broken."""
    result = []
    for update in updates:
        pages = list(update)
        changed = True
        while changed:
            changed = False
            for b, r in combinations(range(len(pages)), 2):
                for before, after in rules:
                    if pages[b] == after and pages[r] == before:
                        pages[b], pages[r] = pages[r], pages[b]
                        changed = True
        result.append(pages)
    return result


def sum_reordered_middles(
    rules: Sequence[Sequence[int]], updates: Iterable[Sequence[int]]
) -> int:
    """Sum the middle pages of the rule-breaking updates once they are reordered."""
    rule_set = _rule_set(rules)
    broken = [update for update in updates if _violates(rule_set, update)]
    return _middle_sum(reorder(rules, broken))