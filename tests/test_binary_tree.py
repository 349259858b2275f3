import io

import pytest

from dsapractice.binary_tree import Node, build_tree, main, preorder


def test_zero_means_no_tree():
    assert build_tree([0]) is None


def test_single_node():
    assert build_tree([1, 5, 0, 0]) == Node(5)


def test_left_and_right_children():
    root = build_tree([1, 1, 1, 2, 0, 0, 1, 3, 0, 0])
    assert root == Node(1, Node(2), Node(3))
    assert list(preorder(root)) == [1, 2, 3]


def test_any_nonzero_choice_creates_node():
    assert build_tree([7, 4, 0, 0]) == Node(4)


def test_missing_answers_raise():
    with pytest.raises(ValueError):
        build_tree([1, 5, 0])


def test_extra_answers_ignored():
    assert build_tree([1, 9, 0, 0, 1, 2]) == Node(9)


def test_preorder_empty():
    assert list(preorder(None)) == []


def test_main_with_arguments(capsys):
    assert main(["1", "7", "0", "0"]) == 0
    assert capsys.readouterr().out == "Preorder : 7\n"


def test_main_empty_tree(capsys):
    assert main(["0"]) == 0
    assert capsys.readouterr().out == "Tree is empty\n"


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1 1\n1 2 0 0\n0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out == "Preorder : 1 2\n"


def test_main_incomplete_answers(capsys):
    assert main(["1", "3"]) == 1
    assert "ended" in capsys.readouterr().err