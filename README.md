# bubblekit

Two bubble sorts and the tools to check them.

- `bubblekit.iterative.bubble_sort` sorts a mutable sequence in place, pass
  by pass, stops early once a pass makes no swap, and returns the same object.
- `bubblekit.recursive.recursive_bubble_sort` returns a new ascending list and
  leaves its input untouched. Each phase walks a pair of cursors in from the
  right end of the data to pick the next element, using the previous pick and
  its position to settle ties.

Around them sit array generators (`bubblekit.generators`) and three test
suites of increasing size that run a sorter over many arrays and report which
ones come back sorted with all their elements intact.

## Installing

```
pip install .
```

For running the package's own tests:

```
pip install ".[test]"
pytest
```

## Using it from Python

```python
from bubblekit.iterative import bubble_sort, format_listing
from bubblekit.recursive import recursive_bubble_sort

print(bubble_sort([5, 1, 4, 2]))            # [1, 2, 4, 5]
print(recursive_bubble_sort([3, 3, 1, 2]))  # [1, 2, 3, 3]
print(format_listing([1, 2]))
```

`format_listing` renders one `array[i] :- value` line per element.
`bubblekit.showcase.format_labelled` renders values as `label: { a b c }`, and
`bubblekit.showcase.run_demo` writes an input line and a sorted line to a
stream.

To check a sorter against a list of cases:

```python
import random
import sys

from bubblekit.harness import SortCase, run_case, run_suite, standard_cases
from bubblekit.recursive import recursive_bubble_sort

cases = standard_cases(random.Random(7))
run_suite(cases, recursive_bubble_sort, sys.stdout)
print(run_case(SortCase("mine", (3, 1, 2)), recursive_bubble_sort))  # True
```

`run_case` sorts a copy of a `SortCase`'s values and checks the result with
`is_sorted` and `same_elements`. `format_result` and `format_summary` build the
coloured result lines and the closing block. `standard_cases` builds 99 cases,
`bubblekit.extended_suite.extended_cases` builds 1000 (the standard ones plus
generated arrays up to size 100), and `bubblekit.safe_suite.safe_cases` builds
a smaller set that includes 32-bit `INT_MIN` and `INT_MAX` values. Each takes
an optional `random.Random` so a run can be repeated.

`bubblekit.recursive.sample_check` sorts random draws from a pool of values
(by default 5000 samples of size 5 from 1–9, each twice) and compares each
result with `sorted`, returning the pass count and the failures.

The generators in `bubblekit.generators` build sorted, reverse-sorted,
constant, duplicate-heavy, nearly sorted, mountain, valley, alternating,
arithmetic, geometric and almost-constant arrays, random arrays and random
permutations. They raise `ValueError` for a negative size.

## Commands

| Command | What it does |
| --- | --- |
| `bubblekit-sort` | Prompts for a size and that many integers on standard input, prints them sorted with `bubble_sort`. |
| `bubblekit-recursive` | The same with `recursive_bubble_sort`; with `--check` it runs `sample_check` instead (`--samples`, `--size`, `--seed`). |
| `bubblekit-demo` | Sorts the integers given as arguments (42 if none) with the recursive sort; `--labelled` shows input and sorted lines. |
| `bubblekit-suite` | Runs the standard suite. |
| `bubblekit-extended-suite` | Runs the extended suite and reports processor time taken. |
| `bubblekit-safe-suite` | Runs the safe suite with the extreme-value cases. |

The three suites take `--sorter recursive|iterative` (recursive by default)
and `--seed`. They clear the screen, print a coloured PASS or FAIL line per
case and a summary, and exit with status 1 if any case failed. Bad input to
the sorting commands is reported on standard error with exit status 1.

## What it does not do

The suites write plain ANSI-coloured text; there is no interactive screen,
animation or keypress handling.