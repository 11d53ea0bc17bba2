import logging

import pytest

from dependency_miner.lib.automaton import (
    ROOT,
    CaseEvent,
    ExtendedPrefixAutomaton,
    Transition,
    UnknownStateError,
    events_from_traces,
)


def test_events_from_traces_links_case_predecessors():
    streams = events_from_traces([["Apple", "Banana"], ["Cherry"]])
    assert streams == [
        [
            CaseEvent("case_0", "Apple", None),
            CaseEvent("case_0", "Banana", "case_0"),
        ],
        [CaseEvent("case_1", "Cherry", None)],
    ]


def test_truncated_labels_warn_on_collision(caplog):
    with caplog.at_level(logging.WARNING):
        streams = events_from_traces(
            [["Apple", "Banana"], ["Avocado"]], truncate_labels=True
        )
    assert [e.activity for e in streams[0]] == ["A", "B"]
    assert "Apple" in caplog.text and "Avocado" in caplog.text


def test_full_labels_keep_distinct_states():
    traces = [["Apple", "Banana"], ["Avocado"]]
    full = ExtendedPrefixAutomaton.from_traces(traces)
    truncated = ExtendedPrefixAutomaton.from_traces(traces, truncate_labels=True)
    assert full.state_count == 4
    assert truncated.state_count == 3
    assert truncated.alphabet == frozenset({"A", "B"})


def test_partitions_follow_branching(sample_traces):
    epa = ExtendedPrefixAutomaton.from_traces(sample_traces)
    assert epa.state_count == 11
    assert epa.max_partition == 4
    assert epa.partition_sizes() == {1: 4, 2: 3, 3: 2, 4: 1}
    assert epa.states_in_partition(2) == [5, 6, 7]
    assert epa.state(ROOT).partition is None
    assert epa.state(ROOT).is_root
    assert all(s.partition for s in epa.states[1:])


def test_shared_prefixes_reuse_states(sample_traces):
    epa = ExtendedPrefixAutomaton.from_traces(sample_traces)
    first = epa.successor(ROOT, "A")
    assert first == 1
    assert len(epa.state(first).events) == 4
    assert epa.successor(first, "D") == 10
    assert epa.successor(first, "Z") is None
    assert epa.alphabet == frozenset("ABCDE")


def test_transitions_are_unique_per_source_and_symbol(sample_traces):
    transitions = ExtendedPrefixAutomaton.from_traces(sample_traces).transitions()
    keys = [(t.source, t.symbol) for t in transitions]
    assert len(keys) == len(set(keys)) == 10
    assert transitions[0] == Transition(ROOT, "A", 1)


def test_build_is_deterministic(sample_traces):
    streams = events_from_traces(sample_traces)
    a = ExtendedPrefixAutomaton.build(streams)
    b = ExtendedPrefixAutomaton.build(streams)
    assert a.transitions() == b.transitions()
    assert [s.partition for s in a.states] == [s.partition for s in b.states]


def test_predecessor_reference_resolves_to_referenced_case():
    epa = ExtendedPrefixAutomaton.build(
        [
            [CaseEvent("c1", "A"), CaseEvent("c1", "B", "c1")],
            [CaseEvent("c2", "C", "c1"), CaseEvent("c3", "D", "unknown")],
        ]
    )
    assert epa.successor(2, "C") == 3
    assert epa.state(3).partition == 1
    assert epa.successor(ROOT, "D") == 4
    assert epa.last_state("c2") == 3
    assert epa.last_state("missing") == ROOT


def test_unknown_state_raises(sample_traces):
    epa = ExtendedPrefixAutomaton.from_traces(sample_traces)
    with pytest.raises(UnknownStateError):
        epa.state(99)
    with pytest.raises(KeyError):
        epa.successor(-1, "A")


def test_empty_input_has_only_root():
    epa = ExtendedPrefixAutomaton.build([])
    assert epa.state_count == 1
    assert len(epa) == 1
    assert epa.partition_sizes() == {}
    assert epa.transitions() == []
