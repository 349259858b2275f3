import random

import pytest

from dsapractice.benchmark import Timing, main, random_values, time_sorts

NAMES = ["Bubble Sort", "Insertion Sort", "Selection Sort", "Merge Sort", "Quick Sort"]


def test_random_values_length_and_range():
    values = random_values(200, random.Random(3))
    assert len(values) == 200
    assert all(0 <= value < 100 for value in values)


def test_random_values_reproducible_with_seed():
    first = random_values(50, random.Random(9))
    second = random_values(50, random.Random(9))
    assert len(first) == 50
    assert all(0 <= value < 100 for value in first)
    assert second == first


def test_random_values_zero():
    assert random_values(0) == []


def test_random_values_negative_size():
    with pytest.raises(ValueError):
        random_values(-1)


def test_time_sorts_names_in_order():
    timings = time_sorts([5, 2, 9, 1])
    assert [timing.name for timing in timings] == NAMES
    assert all(timing.seconds >= 0 for timing in timings)


def test_time_sorts_does_not_change_input():
    values = [3, 1, 2]
    time_sorts(values)
    assert values == [3, 1, 2]


def test_timing_string():
    assert str(Timing("Quick Sort", 0.5)) == "Time taken for Quick Sort: 0.500000 seconds"


def test_main_output(capsys):
    assert main(["6", "--seed", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Unsorted array: ")
    numbers = [int(token) for token in lines[0][len("Unsorted array: "):].split()]
    assert numbers == random_values(6, random.Random(1))
    assert len(lines) == 1 + len(NAMES)
    for line, name in zip(lines[1:], NAMES):
        assert line.startswith(f"Time taken for {name}: ")
        assert line.endswith(" seconds")


def test_main_rejects_negative_size():
    with pytest.raises(SystemExit):
        main(["-3"])