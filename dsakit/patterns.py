"""Text patterns built from stars, numbers and letters.

Every pattern function takes a size ``n`` and returns the rows as a list of
strings. Each cell is two characters wide (the symbol followed by a space, or
two spaces for a blank), so rows keep their trailing space. A size of zero or
less yields no rows.
"""

import argparse
import sys

_STAR = "* "
_BLANK = "  "


def _letter(offset):
    return chr(ord("A") + offset)


def _cells(symbols):
    return "".join(f"{symbol} " for symbol in symbols)


def row_number_square(n):
    """An ``n`` by ``n`` square whose row ``i`` repeats the number ``i``."""
    return [_cells([row] * n) for row in range(1, n + 1)]


def letter_square(n):
    """An ``n`` by ``n`` square where every row reads A, B, C, ..."""
    row = _cells(_letter(k) for k in range(n))
    return [row for _ in range(n)]


def counting_grid(n):
    """An ``n`` by ``n`` grid counting from 1, each number right-aligned in 4 columns."""
    return [
        "".join(f"{value:>4}" for value in range(row * n + 1, row * n + n + 1))
        for row in range(n)
    ]


def letter_grid(n):
    """An ``n`` by ``n`` grid of consecutive characters from A, each right-aligned in 2 columns."""
    return [
        "".join(f"{_letter(k):>2}" for k in range(row * n, row * n + n))
        for row in range(n)
    ]


def star_triangle(n):
    """A left-aligned triangle with one star on the first row and ``n`` on the last."""
    return [_STAR * width for width in range(1, n + 1)]


def row_number_triangle(n):
    """A triangle whose row ``i`` holds the number ``i`` written ``i`` times."""
    return [_cells([row] * row) for row in range(1, n + 1)]


def row_letter_triangle(n):
    """A triangle whose ``i``-th row holds the ``i``-th letter ``i`` times."""
    return [_cells([_letter(row)] * (row + 1)) for row in range(n)]


def descending_number_triangle(n):
    """A triangle whose row ``i`` counts down from ``i`` to 1."""
    return [_cells(range(row, 0, -1)) for row in range(1, n + 1)]


def floyd_triangle(n):
    """Floyd's triangle: consecutive numbers from 1, row ``i`` holding ``i`` of them."""
    lines = []
    start = 1
    for width in range(1, n + 1):
        lines.append(_cells(range(start, start + width)))
        start += width
    return lines


def descending_letter_triangle(n):
    """A triangle whose row ``i`` runs from the ``i``-th letter back down to A."""
    return [_cells(_letter(k) for k in range(row - 1, -1, -1)) for row in range(1, n + 1)]


def inverted_star_triangle(n):
    """A left-aligned triangle with ``n`` stars on the first row and one on the last."""
    return [_STAR * (n - row + 1) for row in range(1, n + 1)]


def right_aligned_star_triangle(n):
    """A star triangle padded on the left so that rows line up on the right."""
    return [_BLANK * (n - row) + _STAR * row for row in range(1, n + 1)]


def inverted_number_triangle(n):
    """A right-aligned, upside-down triangle whose row ``i`` repeats the number ``i``."""
    return [_BLANK * (row - 1) + _cells([row] * (n - row + 1)) for row in range(1, n + 1)]


def inverted_letter_triangle(n):
    """A right-aligned, upside-down triangle whose ``i``-th row repeats the ``i``-th letter."""
    return [
        _BLANK * (row - 1) + _cells([_letter(row - 1)] * (n - row + 1))
        for row in range(1, n + 1)
    ]


def inverted_pyramid(n):
    """An upside-down centred pyramid of stars, ``2n - 1`` wide at the top."""
    return [
        _BLANK * (row - 1) + _STAR * (n - row + 1) + _STAR * (n - row)
        for row in range(1, n + 1)
    ]


def number_pyramid(n):
    """A centred pyramid whose row ``i`` reads 1 up to ``i`` and back down to 1."""
    return [
        _BLANK * (n - row) + _cells(range(1, row + 1)) + _cells(range(row - 1, 0, -1))
        for row in range(1, n + 1)
    ]


def hollow_diamond(n):
    """The outline of a diamond, ``2n - 1`` rows tall."""
    lines = []
    for row in range(n):
        line = _BLANK * (n - row) + _STAR
        if row != 0:
            line += _BLANK * (2 * row - 1) + _STAR
        lines.append(line)
    for row in range(n - 1):
        line = _BLANK * (row + 2) + _STAR
        if row != n - 2:
            line += _BLANK * max(0, 2 * (n - row) - 5) + _STAR
        lines.append(line)
    return lines


def diamond(n):
    """A solid diamond of stars, ``2n - 1`` rows tall and wide."""
    top = [_BLANK * (n - row) + _STAR * (2 * row - 1) for row in range(1, n + 1)]
    bottom = [_BLANK * row + _STAR * (2 * (n - row) - 1) for row in range(1, n)]
    return top + bottom


def butterfly(n):
    """Two mirrored star wings meeting in the middle, ``2n`` rows tall."""
    top = [
        _STAR * row + _BLANK * (n - row) + _BLANK * (n - row) + _STAR * row
        for row in range(1, n + 1)
    ]
    bottom = [
        _STAR * (n - row + 1) + _BLANK * (row - 1) + _BLANK * (row - 1) + _STAR * (n - row + 1)
        for row in range(1, n + 1)
    ]
    return top + bottom


PATTERNS = {
    function.__name__: function
    for function in (
        row_number_square,
        letter_square,
        counting_grid,
        letter_grid,
        star_triangle,
        row_number_triangle,
        row_letter_triangle,
        descending_number_triangle,
        floyd_triangle,
        descending_letter_triangle,
        inverted_star_triangle,
        right_aligned_star_triangle,
        inverted_number_triangle,
        inverted_letter_triangle,
        inverted_pyramid,
        number_pyramid,
        hollow_diamond,
        diamond,
        butterfly,
    )
}


def render(name, n):
    """Return the named pattern of size ``n`` as text, one line per row.

    Raises ValueError for an unknown pattern name.
    """
    try:
        build = PATTERNS[name]
    except KeyError:
        raise ValueError(f"unknown pattern: {name!r}") from None
    return "".join(f"{line}\n" for line in build(n))


def main(argv=None):
    """Print a pattern; the size is read from the prompt when not given."""
    parser = argparse.ArgumentParser(prog="dsakit-patterns", description="Print a text pattern.")
    parser.add_argument("pattern", choices=sorted(PATTERNS))
    parser.add_argument("size", type=int, nargs="?")
    args = parser.parse_args(argv)
    size = args.size
    if size is None:
        answer = input("Enter a number: ")
        try:
            size = int(answer)
        except ValueError:
            parser.error(f"invalid size: {answer!r}")
    sys.stdout.write(render(args.pattern, size))
    return 0