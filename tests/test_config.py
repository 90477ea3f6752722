"""
Tests for the JSON configuration layer.
"""
import importlib
import json

import pytest

import config.config as config_module
from triage import InjurySeverityTable


class TestDefaultConfig:

    def test_default_injury_table(self):
        table = config_module.INJURY_TABLE
        assert isinstance(table, InjurySeverityTable)
        assert len(table) == 30
        assert table.severity_of("Heart Attack") == 1
        assert table.severity_of("Muscle Strain") == 5

    def test_seed_patients_resolve_against_table(self):
        for entry in config_module.SEED_PATIENTS:
            assert entry['injury'] in config_module.INJURY_TABLE

    def test_simulation_defaults(self):
        assert config_module.SIMULATION_ENABLED is False
        assert config_module.TREATMENT_MINUTES > 0


class TestOverride:

    @pytest.fixture(autouse=True)
    def restore_config(self, monkeypatch):
        yield
        monkeypatch.delenv('TRIAGE_CONFIG_PATH', raising=False)
        importlib.reload(config_module)

    def test_override_file_is_loaded(self, monkeypatch, tmp_path):
        override = tmp_path / "override.json"
        override.write_text(json.dumps({
            "injuries": {"Stubbed Toe": 5},
            "session": {"pacing_seconds": 0},
            "simulation": {"enabled": True, "num_simulations": 2}
        }), encoding='utf-8')
        monkeypatch.setenv('TRIAGE_CONFIG_PATH', str(override))

        reloaded = importlib.reload(config_module)
        assert list(reloaded.INJURY_TABLE) == ["Stubbed Toe"]
        assert reloaded.PACING_SECONDS == 0
        assert reloaded.SIMULATION_ENABLED is True
        assert reloaded.NUM_SIMULATIONS == 2
        assert reloaded.SEED_PATIENTS == []

    def test_missing_override_file_raises(self, monkeypatch, tmp_path):
        monkeypatch.setenv('TRIAGE_CONFIG_PATH', str(tmp_path / "missing.json"))
        with pytest.raises(FileNotFoundError):
            importlib.reload(config_module)
