# dsakit

A small collection of classic algorithm exercises written as plain Python
functions: searching, sorting, array problems, string problems, recursion,
number theory and console text patterns. It has no dependencies outside the
standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Modules

### `dsakit.searching`

`linear_search`, `binary_search`, `binary_search_recursive`,
`search_rotated`, `peak_index_linear` and `peak_index_binary` return an
index, or `-1` when nothing is found. `single_non_duplicate_linear` and
`single_non_duplicate_binary` return the unpaired element of a sorted
sequence and raise `ValueError` if there is none.

Binary search on the answer:

- `allocate_books(pages, students)`: smallest possible largest share of pages
  when books are given out in contiguous runs.
- `min_time_to_paint(boards, painters)`: least time for painters working on
  contiguous runs of boards.
- `largest_min_distance(stalls, cows)`: largest minimum gap when placing cows
  in stalls.

Each raises `ValueError` for impossible inputs (for example more students than
books, or fewer than two cows).

### `dsakit.sorting`

`bubble_sort`, `selection_sort` and `insertion_sort` take an optional
`reverse=True` for descending order. `merge_sorted(left, right)` merges two
ascending sequences and `merge_sort(values)` sorts ascending. All return new
lists and leave their input unchanged.

### `dsakit.arrays`

`product_except_self`, `single_number`, `xor_all`, `subarrays` (a generator),
`max_subarray_sum_brute`, `max_subarray_sum` (Kadane's algorithm),
`pair_sum` (an index pair in a sorted sequence, or `None`),
`majority_element` (Moore's voting, or `None`), `max_area`, `max_profit`,
`reverse_array`, `sum_and_product`, `min_and_max`, `intersection`, `doubled`.

### `dsakit.strings`

`string_length` (characters before the first NUL), `reverse_chars`,
`is_alphanumeric`, `is_palindrome` (ignores case and non-alphanumerics),
`remove_occurrences`, `check_inclusion` (is a permutation of one string a
substring of another), `reverse_words`, `compress` (run-length encoding of a
list of characters).

### `dsakit.recursion`

`countdown`, `factorial`, `sum_to`, `fibonacci`, `is_sorted`, `subsets`,
`subsets_with_dup`, `permutations`.

### `dsakit.numbers`

`is_prime`, `primes_up_to`, `count_primes` (sieve of Eratosthenes, primes
below `n`), `digit_sum`, `digit_count`, `is_armstrong`, `gcd_brute`,
`gcd_subtractive`, `gcd`, `lcm`, `reverse_number`, `is_palindrome_number`,
`triangular`, `n_choose_r`, `decimal_to_binary` (5 -> 101),
`binary_to_decimal` (101 -> 5) and `power` (binary exponentiation, returns a
float).

### `dsakit.patterns`

Each pattern function takes a size `n` and returns the rows as a list of
strings, with every cell two characters wide: `row_number_square`,
`letter_square`, `counting_grid`, `letter_grid`, `star_triangle`,
`row_number_triangle`, `row_letter_triangle`, `descending_number_triangle`,
`floyd_triangle`, `descending_letter_triangle`, `inverted_star_triangle`,
`right_aligned_star_triangle`, `inverted_number_triangle`,
`inverted_letter_triangle`, `inverted_pyramid`, `number_pyramid`,
`hollow_diamond`, `diamond`, `butterfly`. `render(name, n)` returns a pattern
by name as text, one line per row; `PATTERNS` maps the names to the functions.

## Example

```python
from dsakit.searching import binary_search
from dsakit.sorting import merge_sort
from dsakit.numbers import gcd, lcm
from dsakit.patterns import render

binary_search([-1, 0, 3, 5, 9, 12], 0)   # 1
merge_sort([5, 2, 4, 7, 1, 3, 2, 6])     # [1, 2, 2, 3, 4, 5, 6, 7]
gcd(20, 28), lcm(20, 28)                 # (4, 140)
print(render("diamond", 3), end="")
```

## Command line

Print a pattern to the terminal:

```
dsakit-patterns butterfly 4
```

The first argument is the pattern name, the second its size. If the size is
left out, it is asked for at a prompt. Run `dsakit-patterns --help` for the
list of pattern names.