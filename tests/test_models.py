"""Tests for the record and phase models."""

from dynamsg.models import MessagRecord, Phase


def test_add_parent_returns_index():
    record = MessagRecord()
    assert record.add_parent("Init", 1.0, 10.0, 1.5, 10.0) == 0
    assert record.add_parent("Element processing", 9.0, 90.0, 9.5, 90.0) == 1
    child = record.add_child(1, "Solids", 9.0, 90.0, 9.5, 90.0)
    assert record.phases[1].children == [child]
    assert record.phases[0].children == []


def test_find_phase_prefers_top_level():
    record = MessagRecord(phases=[
        Phase("Contact algorithm", children=[Phase("Solids")]),
        Phase("Solids", clock_seconds=3.0),
    ])
    assert record.find_phase("Solids").clock_seconds == 3.0
    assert record.find_phase("Missing") is None


def test_find_child_phase():
    record = MessagRecord()
    index = record.add_parent("Element processing", 1.0, 1.0, 1.0, 1.0)
    record.add_child(index, "Shells", 0.5, 0.5, 0.75, 0.5)
    assert record.find_phase("Shells").clock_seconds == 0.75


def test_total_clock_seconds_counts_parents_only():
    record = MessagRecord()
    index = record.add_parent("A", 1.0, 1.0, 2.0, 1.0)
    record.add_child(index, "A1", 1.0, 1.0, 2.0, 1.0)
    record.add_parent("B", 1.0, 1.0, 3.0, 1.0)
    assert record.total_clock_seconds() == 5.0
