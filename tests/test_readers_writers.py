import io
import re

import pytest

from osalgos.readers_writers import SharedResource, main, run_simulation

READ_LINE = re.compile(r"Reader (\d+): \((before|after) read\) shared_data = (\d+)")


def test_single_write_and_read():
    resource = SharedResource()
    assert resource.write(1) == 10
    assert resource.read(1) == (10, 10)
    assert resource.log[0] == "Writer 1: wrote shared_data = 10"
    assert resource.log[1] == "Reader 1: (before read) shared_data = 10"


def test_unsynchronized_sequential_use():
    resource = SharedResource(synchronized=False, value=5)
    assert resource.write(2) == 15
    assert resource.read(3) == (15, 15)


def test_synchronized_simulation_loses_no_writes():
    resource = run_simulation(True, readers=5, writers=2, seed=1)
    assert resource.value == 20
    writes = [line for line in resource.log if line.startswith("Writer")]
    assert len(writes) == 2


def test_synchronized_readers_see_stable_value():
    resource = run_simulation(True, readers=4, writers=3, seed=7)
    assert resource.value == 30
    assert len(resource.log) == 4 * 2 + 3
    seen: dict[tuple[str, str], int] = {}
    for line in resource.log:
        match = READ_LINE.fullmatch(line)
        if match:
            seen[(match.group(1), match.group(2))] = int(match.group(3))
    readers = {key[0] for key in seen}
    assert len(readers) == 4
    for reader in readers:
        assert seen[(reader, "before")] == seen[(reader, "after")]


def test_unsynchronized_value_bounds():
    resource = run_simulation(False, readers=3, writers=2, seed=3)
    assert 10 <= resource.value <= 20
    assert resource.value % 10 == 0
    assert sum(line.startswith("Reader") for line in resource.log) == 6


def test_writer_ids_are_sequential():
    resource = run_simulation(True, readers=0, writers=3, seed=0)
    ids = sorted(int(line.split()[1].rstrip(":")) for line in resource.log)
    assert ids == [1, 2, 3]
    assert resource.value == 30


def test_negative_counts_rejected():
    with pytest.raises(ValueError):
        run_simulation(True, readers=-1, writers=1)


def test_main_synchronized(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main(["--seed", "2"]) == 0
    out = capsys.readouterr().out
    assert out.rstrip().endswith("Final value of shared_data = 20")


def test_main_bad_answer(monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("maybe\n"))
    assert main([]) == 1