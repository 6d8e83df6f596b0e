import io

import pytest

from bubblekit.iterative import format_listing
from bubblekit.showcase import format_labelled, main, run_demo


def test_format_labelled_pinned():
    assert format_labelled([1, 2, 3], "Input") == "Input: { 1 2 3 }"


def test_format_labelled_empty():
    assert format_labelled([], "Sorted") == "Sorted: { }"


def test_run_demo_returns_sorted_and_writes_both_lines():
    out = io.StringIO()
    data = [5, -1, 3, 3, 0]
    result = run_demo(data, out)
    assert result == sorted(data)
    assert data == [5, -1, 3, 3, 0]
    lines = out.getvalue().splitlines()
    assert lines == [format_labelled(data, "Input"), format_labelled(sorted(data), "Sorted")]


@pytest.mark.parametrize("data", [[42], [2, 1], [9, 8, 7, 6, 5, 4], [1, 1, 1]])
def test_run_demo_sorts(data):
    assert run_demo(data, io.StringIO()) == sorted(data)


def test_main_default_value(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out == format_listing([42]) + "\n"


def test_main_sorts_arguments(capsys):
    assert main(["3", "-7", "10", "3"]) == 0
    assert capsys.readouterr().out == format_listing([-7, 3, 3, 10]) + "\n"


def test_main_labelled(capsys):
    assert main(["--labelled", "2", "1"]) == 0
    out = capsys.readouterr().out
    assert out.splitlines() == [format_labelled([2, 1], "Input"), format_labelled([1, 2], "Sorted")]


def test_main_rejects_non_integer():
    with pytest.raises(SystemExit) as excinfo:
        main(["x"])
    assert excinfo.value.code == 2