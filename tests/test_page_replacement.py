import pytest

from osalgos.page_replacement import (
    EXAMPLE_PAGES,
    PageReplacementResult,
    fifo,
    format_trace,
    lru,
    main,
    optimal,
)


def _all_results(pages, frames):
    return [fifo(pages, frames), lru(pages, frames), optimal(pages, frames)]


def test_one_snapshot_per_access():
    results = [fifo(EXAMPLE_PAGES, 3), lru(EXAMPLE_PAGES, 3), optimal(EXAMPLE_PAGES, 3)]
    for result in results:
        assert len(result.snapshots) == len(EXAMPLE_PAGES)
        assert result.pages == EXAMPLE_PAGES


def test_accessed_page_is_resident():
    results = [fifo(EXAMPLE_PAGES, 3), lru(EXAMPLE_PAGES, 3), optimal(EXAMPLE_PAGES, 3)]
    for result in results:
        for page, snapshot in zip(result.pages, result.snapshots):
            assert page in snapshot


def test_faults_match_misses():
    results = [fifo(EXAMPLE_PAGES, 3), lru(EXAMPLE_PAGES, 3), optimal(EXAMPLE_PAGES, 3)]
    for result in results:
        previous = (None, None, None)
        misses = 0
        for page, snapshot in zip(result.pages, result.snapshots):
            if page not in previous:
                misses += 1
            previous = snapshot
        assert result.faults == misses
        assert result.hits == len(EXAMPLE_PAGES) - misses


def test_few_distinct_pages_fault_once_each():
    pages = [4, 9, 4, 9, 9, 4]
    assert fifo(pages, 3).faults == 2
    assert lru(pages, 3).faults == 2
    assert optimal(pages, 3).faults == 2


def test_zero_frames_rejected():
    with pytest.raises(ValueError):
        fifo([1, 2, 3], 0)
    with pytest.raises(ValueError):
        lru([1, 2, 3], 0)
    with pytest.raises(ValueError):
        optimal([1, 2, 3], 0)


def test_optimal_never_worse():
    best = optimal(EXAMPLE_PAGES, 3).faults
    assert best <= fifo(EXAMPLE_PAGES, 3).faults
    assert best <= lru(EXAMPLE_PAGES, 3).faults


def test_fifo_belady_anomaly():
    pages = [1, 2, 3, 4, 1, 2, 5, 1, 2, 3, 4, 5]
    assert fifo(pages, 4).faults > fifo(pages, 3).faults


def test_fifo_evicts_oldest():
    result = fifo([1, 2, 3, 1, 4], 3)
    assert 1 not in result.snapshots[-1]
    assert 2 in result.snapshots[-1]


def test_lru_evicts_least_recently_used():
    result = lru([1, 2, 3, 1, 4], 3)
    assert 2 not in result.snapshots[-1]
    assert 1 in result.snapshots[-1]


def test_optimal_evicts_page_never_used_again():
    result = optimal([1, 2, 3, 4, 1, 2], 3)
    assert 3 not in result.snapshots[3]
    assert 4 in result.snapshots[3]


def test_format_trace_shows_empty_frames():
    text = format_trace(fifo([5], 3))
    assert text.splitlines()[0] == "Page 5 accessed: 5  -  - "


def test_format_trace_reports_fault_total():
    result = lru(EXAMPLE_PAGES, 3)
    text = format_trace(result)
    assert text.splitlines()[-1] == f"Total page faults: {result.faults}"
    assert len(text.splitlines()) == len(EXAMPLE_PAGES) + 2


def test_result_is_immutable_record():
    result = PageReplacementResult((1,), ((1, None),), 1)
    with pytest.raises(AttributeError):
        result.faults = 0  # type: ignore[misc]
    assert result.hits == 0


def test_main_prints_sequence_and_trace(capsys):
    assert main(["lru"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Page Access Sequence: 7 0 1 2 0 3 0 4 2 3 0 3 3 ")
    assert f"Total page faults: {lru(EXAMPLE_PAGES, 3).faults}" in out


def test_main_rejects_bad_frames(capsys):
    assert main(["fifo", "--frames", "0", "1", "2"]) == 1
    assert "error" in capsys.readouterr().err