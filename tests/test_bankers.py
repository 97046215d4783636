import io

import pytest

from osalgos.bankers import UnsafeStateError, main, safe_sequence

ALLOCATION = [[0, 1, 0], [2, 0, 0], [3, 0, 2], [2, 1, 1], [0, 0, 2]]
MAXIMUM = [[7, 5, 3], [3, 2, 2], [9, 0, 2], [2, 2, 2], [4, 3, 3]]
AVAILABLE = [3, 3, 2]


def test_classic_example_sequence():
    assert safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE) == [1, 3, 4, 0, 2]


def test_sequence_is_permutation_and_feasible():
    seq = safe_sequence(ALLOCATION, MAXIMUM, AVAILABLE)
    assert sorted(seq) == list(range(len(ALLOCATION)))
    work = list(AVAILABLE)
    for i in seq:
        need = [m - a for a, m in zip(ALLOCATION[i], MAXIMUM[i])]
        assert all(n <= w for n, w in zip(need, work))
        work = [w + a for w, a in zip(work, ALLOCATION[i])]


def test_unsafe_state_raises():
    with pytest.raises(UnsafeStateError) as info:
        safe_sequence([[1]], [[3]], [1])
    assert info.value.completed == ()


def test_unsafe_reports_partial_progress():
    with pytest.raises(UnsafeStateError) as info:
        safe_sequence([[0], [1]], [[1], [5]], [1])
    assert info.value.completed == (0,)


def test_no_processes_is_safe():
    assert safe_sequence([], [], [1, 2]) == []


def test_shape_mismatch_rejected():
    with pytest.raises(ValueError):
        safe_sequence([[1, 2]], [[1]], [0, 0])
    with pytest.raises(ValueError):
        safe_sequence([[1]], [], [0])


def _stdin(allocation, maximum, available):
    parts = [str(len(allocation)), str(len(available))]
    parts += [" ".join(map(str, row)) for row in allocation]
    parts += [" ".join(map(str, row)) for row in maximum]
    parts.append(" ".join(map(str, available)))
    return io.StringIO("\n".join(parts) + "\n")


def test_main_safe(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _stdin(ALLOCATION, MAXIMUM, AVAILABLE))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "System is in a safe state." in out
    assert "Safe sequence is: P1 P3 P4 P0 P2" in out


def test_main_unsafe(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", _stdin([[1]], [[3]], [1]))
    assert main([]) == 0
    assert "System is not in a safe state" in capsys.readouterr().out


def test_main_truncated_input(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("2 1\n0\n"))
    assert main([]) == 1