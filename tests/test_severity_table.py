"""
Unit tests for the injury-severity table.
"""
import pickle

import pytest

from triage import InjurySeverityTable, InvalidSeverity, UnknownInjury


class TestLookup:

    def test_known_injury_returns_severity(self, small_table):
        assert small_table.severity_of("Heart Attack") == 1
        assert small_table["Minor Cut"] == 5

    def test_unknown_injury_raises(self, small_table):
        with pytest.raises(UnknownInjury) as exc_info:
            small_table.severity_of("Not A Real Injury")
        assert exc_info.value.injury_type == "Not A Real Injury"

    def test_injuries_are_listed_alphabetically(self, small_table):
        assert small_table.injuries() == [
            "Broken Bone", "Heart Attack", "Major Bleeding", "Minor Cut", "Sprained Ankle"
        ]

    def test_contains_and_len(self, small_table):
        assert "Broken Bone" in small_table
        assert "Paper Cut" not in small_table
        assert len(small_table) == 5


class TestImmutability:

    def test_item_assignment_is_rejected(self, small_table):
        with pytest.raises(TypeError):
            small_table["Minor Cut"] = 1

    def test_source_mapping_changes_do_not_leak(self):
        source = {"Stroke": 1}
        table = InjurySeverityTable(source)
        source["Stroke"] = 5
        source["Cold or Flu"] = 5
        assert table.severity_of("Stroke") == 1
        assert "Cold or Flu" not in table

    def test_survives_pickling(self, small_table):
        restored = pickle.loads(pickle.dumps(small_table))
        assert dict(restored) == dict(small_table)


class TestValidation:

    @pytest.mark.parametrize("severity", [0, 6, "1", 2.5, True, None])
    def test_invalid_severity_is_rejected(self, severity):
        with pytest.raises(InvalidSeverity):
            InjurySeverityTable({"Odd Injury": severity})

    def test_invalid_severity_is_a_value_error(self):
        with pytest.raises(ValueError):
            InjurySeverityTable({"Odd Injury": 9})
