import io
import random

import pytest

from bubblekit.harness import (
    SortCase,
    format_result,
    format_summary,
    is_sorted,
    main,
    run_case,
    run_suite,
    same_elements,
    standard_cases,
)
from bubblekit.iterative import bubble_sort
from bubblekit.recursive import recursive_bubble_sort


def _identity(values):
    return values


def _drop_last(values):
    return sorted(values)[:-1]


@pytest.mark.parametrize(
    "values, expected",
    [
        ([], True),
        ([5], True),
        ([1, 2], True),
        ([2, 1], False),
        ([1, 1, 1], True),
        ([1, 3, 2], False),
    ],
)
def test_is_sorted(values, expected):
    assert is_sorted(values) is expected


def test_same_elements_respects_multiplicity():
    assert same_elements([3, 1, 1], [1, 1, 3])
    assert not same_elements([3, 1, 1], [1, 3, 3])
    assert not same_elements([1, 2], [1, 2, 2])


def test_sort_case_stores_tuple():
    case = SortCase("Three elements reverse", [3, 2, 1])
    assert case.values == (3, 2, 1)


@pytest.mark.parametrize("sorter", [recursive_bubble_sort, bubble_sort])
def test_standard_cases_all_pass(sorter):
    cases = standard_cases(random.Random(7))
    assert all(run_case(case, sorter) for case in cases)


def test_run_case_detects_unsorted_output():
    assert not run_case(SortCase("Two elements descending", (2, 1)), _identity)


def test_run_case_detects_lost_element():
    assert not run_case(SortCase("Fibonacci sequence", (8, 5, 13, 3, 21, 2, 1, 1)), _drop_last)


def test_run_case_does_not_touch_case():
    case = SortCase("Reverse sorted array", (5, 4, 3, 2, 1))
    run_case(case, bubble_sort)
    assert case.values == (5, 4, 3, 2, 1)


def test_format_result():
    line = format_result("Single element", True)
    assert "[PASS]" in line and line.endswith("Single element")
    assert "[FAIL]" in format_result("Single element", False)


def test_format_summary_all_pass():
    text = format_summary(3, 3)
    assert "0 FAILED" in text
    assert "ALL TESTS PASSED" in text


def test_format_summary_with_failures():
    text = format_summary(2, 3)
    assert "1 FAILED" in text
    assert "Some tests failed. Please check your implementation." in text
    assert "ALL TESTS PASSED" not in text


def test_format_summary_rejects_bad_counts():
    with pytest.raises(ValueError):
        format_summary(4, 3)


def test_standard_cases_shape():
    cases = standard_cases(random.Random(1))
    assert len(cases) == 99
    assert cases[0] == SortCase("Single element", (5,))
    assert cases[-1] == SortCase("Three elements reverse", (3, 2, 1))
    names = [case.name for case in cases]
    assert len(set(names)) == len(names)


def test_standard_cases_families_respect_ranges():
    cases = standard_cases(random.Random(3))
    for case in cases:
        n = len(case.values)
        if case.name.startswith("Random array"):
            assert 3 <= n <= 10
            assert all(0 <= v < 100 for v in case.values)
        elif case.name.startswith("Around zero"):
            assert all(v in (-1, 0, 1) for v in case.values)
        elif case.name.startswith("All same elements"):
            assert len(set(case.values)) == 1
        elif case.name.startswith("Large numbers"):
            assert all(1000 <= v <= 10999 for v in case.values)
        elif case.name.startswith("Mountain array"):
            assert 5 <= n <= 9
            assert max(case.values) == case.values[n // 2 - 1] or max(case.values) == case.values[n // 2]
        if case.name.startswith(("Random", "Duplicates", "Negative")):
            assert f"(size {n})" in case.name


def test_standard_cases_reproducible():
    first = standard_cases(random.Random(5))
    second = standard_cases(random.Random(5))
    assert len(first) == 99
    assert first[1] == SortCase("Two elements ascending", (1, 2))
    assert [case.name for case in first] == [case.name for case in second]
    assert [case.values for case in first] == [case.values for case in second]


def test_run_suite_counts_and_writes():
    cases = [SortCase("Two elements descending", (2, 1)), SortCase("Single element", (5,))]
    out = io.StringIO()
    passed = run_suite(cases, _identity, out)
    text = out.getvalue()
    assert passed == 1
    assert text.startswith("Running 2 test cases...")
    assert "1 PASSED" in text and "1 FAILED" in text


def test_main_runs_suite(capsys):
    assert main(["--seed", "11"]) == 0
    text = capsys.readouterr().out
    assert "BUBBLE SORT TEST SUITE" in text
    assert "Running 99 test cases..." in text
    assert "[FAIL]" not in text


def test_main_iterative_sorter(capsys):
    assert main(["--sorter", "iterative", "--seed", "2"]) == 0
    assert "ALL TESTS PASSED" in capsys.readouterr().out