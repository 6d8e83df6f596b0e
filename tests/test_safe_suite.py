import random
import re
from collections import Counter

import pytest

from bubblekit.iterative import bubble_sort
from bubblekit.recursive import recursive_bubble_sort
from bubblekit.safe_suite import INT_MAX, INT_MIN, main, safe_cases


def _family(cases, prefix):
    pattern = re.compile(re.escape(prefix) + r" (\d+) \(size (\d+)\)$")
    found = []
    for case in cases:
        match = pattern.match(case.name)
        if match:
            found.append((int(match.group(1)), int(match.group(2)), case.values))
    return found


@pytest.fixture
def cases():
    return safe_cases(random.Random(1234))


def test_extreme_case_uses_c_int_limits(cases):
    by_name = {case.name: case.values for case in cases}
    values = by_name["INT_MAX, 0, INT_MIN, 1, -1"]
    assert values[0] == 2**31 - 1
    assert values[2] == -(2**31)


def test_case_count(cases):
    assert len(cases) == 79


def test_fixed_cases_come_first(cases):
    assert cases[0].name == "Single element: [5]"
    assert cases[0].values == (5,)
    assert cases[2].values == (2, 1)
    assert cases[5].values == (1, 3, 2)
    assert cases[7].values == tuple(range(1, 11))
    assert cases[8].values == tuple(range(10, 0, -1))


def test_extreme_cases_present(cases):
    by_name = {case.name: case.values for case in cases}
    assert by_name["INT_MAX, 0, INT_MIN, 1, -1"] == (INT_MAX, 0, INT_MIN, 1, -1)
    assert by_name["INT_MIN, INT_MAX, 5, -5, 0"] == (INT_MIN, INT_MAX, 5, -5, 0)


@pytest.mark.parametrize(
    "prefix, count, low, high",
    [
        ("Random array", 30, 5, 14),
        ("Duplicates array", 20, 4, 11),
        ("Mixed extreme values", 8, 4, 7),
        ("Partially sorted", 5, 6, 10),
        ("Nearly sorted (one swap)", 5, 6, 10),
    ],
)
def test_family_sizes(cases, prefix, count, low, high):
    family = _family(cases, prefix)
    assert [number for number, _, _ in family] == list(range(1, count + 1))
    for _, size, values in family:
        assert low <= size <= high
        assert len(values) == size


def test_random_values_in_range(cases):
    for _, _, values in _family(cases, "Random array"):
        assert all(-50 <= v <= 49 for v in values)


def test_duplicates_are_clustered(cases):
    for _, _, values in _family(cases, "Duplicates array"):
        assert max(values) - min(values) <= 2
        assert all(-10 <= v <= 11 for v in values)


def test_mixed_extremes_values(cases):
    for _, _, values in _family(cases, "Mixed extreme values"):
        assert all(v in (INT_MIN, INT_MAX, 0) or -100 <= v <= 99 for v in values)


def test_partially_sorted_prefix(cases):
    for _, size, values in _family(cases, "Partially sorted"):
        half = size // 2
        assert list(values[:half]) == [j * 2 for j in range(half)]
        assert all(0 <= v < size * 2 for v in values[half:])


def test_nearly_sorted_has_one_swap(cases):
    for _, size, values in _family(cases, "Nearly sorted (one swap)"):
        assert sorted(values) == list(range(size))
        moved = [i for i, v in enumerate(values) if v != i]
        assert len(moved) == 2


def test_same_seed_same_cases():
    first = safe_cases(random.Random(7))
    second = safe_cases(random.Random(7))
    assert len(first) == 79
    assert first[0].name == "Single element: [5]"
    assert [case.name for case in first] == [case.name for case in second]
    assert [case.values for case in first] == [case.values for case in second]


@pytest.mark.parametrize("sorter", [recursive_bubble_sort, bubble_sort])
def test_sorters_sort_every_case(cases, sorter):
    for case in cases:
        result = list(sorter(list(case.values)))
        assert result == sorted(case.values), case.name
        assert Counter(result) == Counter(case.values)


@pytest.mark.parametrize("sorter", ["recursive", "iterative"])
def test_main_reports_all_passed(capsys, sorter):
    code = main(["--seed", "3", "--sorter", sorter])
    output = capsys.readouterr().out
    assert code == 0
    assert "BUBBLE SORT TEST SUITE (Safe Test Set)" in output
    assert "=" * 52 in output
    assert f"Running {len(safe_cases(random.Random(3)))} test cases..." in output
    assert "[FAIL]" not in output
    assert "ALL TESTS PASSED!" in output


def test_main_rejects_unknown_sorter():
    with pytest.raises(SystemExit):
        main(["--sorter", "quick"])