"""Word search: count XMAS words and crossed MAS pairs in a letter grid."""

_FOLLOWERS = {"X": "MAS", "S": "AMX"}
_DIAGONAL_ENDS = {"M": "S", "S": "M"}


def _grid_shape(text: str, min_lines: int) -> tuple[int, int]:
    """Return the stride of one line including its break, and the number of lines."""
    newline = text.find("\n")
    if newline == -1:
        raise ValueError("the grid needs at least one line break")
    width = newline + 1
    if width < 2:
        raise ValueError("the first line of the grid is empty")
    height = text.count("\n") + (0 if text.endswith("\n") else 1)
    if height < min_lines:
        raise ValueError(f"the grid needs at least {min_lines} lines")
    return width, height


def count_xmas(text: str) -> int:
    """Count XMAS written forwards or backwards, vertically, diagonally and across.

    The grid is read as one flat run of characters whose lines are as long as
    the first one; vertical and diagonal words start in any but the last column.
    """
    width, height = _grid_shape(text, 3)
    count = 0
    for x in range(width - 2):
        for y in range(height - 3):
            base = width * y + x
            follow = _FOLLOWERS.get(text[base])
            if follow is None:
                continue
            for stride in (width, width + 1, width - 1):
                if all(
                    text[base + stride * step] == letter
                    for step, letter in enumerate(follow, 1)
                ):
                    count += 1
    return count + text.count("XMAS") + text.count("SAMX")


def count_x_mas(text: str) -> int:
    """Count places where two diagonal MAS words, either way round, cross on an A."""
    width, height = _grid_shape(text, 2)
    count = 0
    for x in range(width - 2):
        for y in range(height - 2):
            base = width * y + x
            end = _DIAGONAL_ENDS.get(text[base])
            if end is None:
                continue
            if text[base + width + 1] != "A" or text[base + 2 * width + 2] != end:
                continue
            corner_end = _DIAGONAL_ENDS.get(text[base + 2 * width])
            if corner_end is not None and text[base + 2] == corner_end:
                count += 1
    return count