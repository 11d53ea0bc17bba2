import math

import pytest

from dependency_miner.lib.analysis import LogSummary, summarize_log
from dependency_miner.lib.dependencies import InvalidThresholdError
from dependency_miner.lib.event_log import TraceStore


def _line(label: str, value: str) -> str:
    return f"{label:<48}{value:<10}"


def test_summary_collects_every_statistic(sample_traces):
    summary = summarize_log(sample_traces)
    assert isinstance(summary, LogSummary)
    data = summary.to_dict()
    assert data["relations"] == 25
    assert data["pure_existence"] == 6
    assert data["eventual_equivalence"] == 2
    assert data["variant_count"] == 4
    assert data["max_frequency_ratio"] == pytest.approx(0.25)
    expected = 10 - (4 * math.log10(4) + 3 * math.log10(3) + 2 * math.log10(2))
    assert data["variant_entropy"] == pytest.approx(expected)
    assert data["normalized_variant_entropy"] == pytest.approx(expected / 10)


def test_render_appends_fixed_width_report(sample_traces):
    summary = summarize_log(TraceStore.from_traces(sample_traces))
    text = summary.render()
    assert text.startswith(summary.matrix.render())
    lines = text.splitlines()
    assert _line("#relations:", "25") in lines
    assert _line("#temporal independence / #relations:", "0.2400") in lines
    assert _line("#(Eventual, <=>):", "2") in lines
    assert _line("#variants:", "4") in lines
    assert _line("Variant Entropy:", "5.5583") in lines
    assert _line("Normalized Variant Entropy:", "0.5558") in lines
    assert str(summary) == text


def test_truncated_labels_change_only_the_automaton():
    traces = [["Apple", "Banana"], ["Avocado", "Cherry"], ["Apple", "Date"]]
    full = summarize_log(traces)
    truncated = summarize_log(traces, truncate_labels=True)
    assert full.matrix.render() == truncated.matrix.render()
    assert full.variant_entropy != truncated.variant_entropy


def test_invalid_threshold_raises(sample_traces):
    with pytest.raises(InvalidThresholdError):
        summarize_log(sample_traces, threshold=-1)


def test_empty_log_summary():
    data = summarize_log([]).to_dict()
    assert data["relations"] == 0
    assert data["variant_count"] == 0
    assert data["variant_entropy"] == 0.0
