"""
Tests for wait-time statistics, CSV exports, plots and the simulation runner.
"""
import csv
import os

import pytest

from core.simulation_runner import SimulationRunner
from triage import Patient, TreatmentLog
from utils import plotting, reporting, statistics


def read_csv(path):
    with open(path, newline='', encoding='utf-8') as f:
        return list(csv.DictReader(f))


class TestStatistics:

    def test_group_waits_by_severity(self):
        groups = statistics.group_waits_by_severity([3, 1, 3, 2], [5.0, 1.0, 7.0, 2.0])
        assert groups == {1: [1.0], 2: [2.0], 3: [5.0, 7.0]}
        assert list(groups) == [1, 2, 3]

    def test_summarize_waits(self):
        summary = statistics.summarize_waits([1.0, 2.0, 3.0, 4.0])
        assert summary['count'] == 4
        assert summary['mean'] == pytest.approx(2.5)
        assert summary['median'] == pytest.approx(2.5)
        assert summary['max'] == 4.0

    def test_summarize_empty(self):
        assert statistics.summarize_waits([])['count'] == 0

    def test_mann_whitney_detects_shorter_waits(self):
        groups = {1: [0.5, 1.0, 1.5, 2.0, 0.0, 1.2], 5: [30.0, 42.0, 55.0, 61.0, 38.0, 47.0]}
        (result,) = statistics.perform_u_test_mannwhitney(groups, 0.05, verbose=False)
        assert result['is_significant']
        assert result['shorter_wait'] == 1
        assert result['effect_magnitude'] == 'large'

    def test_mann_whitney_skips_tiny_groups(self):
        (result,) = statistics.perform_u_test_mannwhitney({1: [1.0], 2: [2.0, 3.0]}, 0.05, verbose=False)
        assert 'p_value' not in result
        assert result['n_a'] == 1


class TestCsvExports:

    def test_treatment_log_rows_and_export(self, tmp_path):
        log = TreatmentLog()
        log.record_treatment(Patient("Ada", "Broken Bone", 3, 0.0), 120.0)
        log.record_treatment(Patient("Bo", "Minor Cut", 5, 60.0), 30.0)

        rows = reporting.treatment_log_rows(log)
        assert [r['Order'] for r in rows] == [1, 2]
        assert rows[1]['Clock_Anomaly'] is True

        path = reporting.export_treatment_log(rows, str(tmp_path / "log.csv"))
        written = read_csv(path)
        assert written[0]['Patient'] == "Ada"
        assert written[0]['Severity'] == "3"
        assert written[0]['Wait_min'] == "2.00"
        assert written[1]['Wait_min'] == "0.00"

    def test_export_treatment_log_without_rows(self, tmp_path):
        assert reporting.export_treatment_log([], str(tmp_path / "none.csv")) is None
        assert not os.path.exists(tmp_path / "none.csv")

    def test_severity_summary(self, tmp_path):
        path = reporting.export_severity_summary({1: [1.0, 3.0], 4: [10.0]}, str(tmp_path / "sev.csv"))
        rows = read_csv(path)
        assert [r['severity'] for r in rows] == ["1", "4"]
        assert rows[0]['wait_mean'] == "2.00"

    def test_statistical_analysis_handles_partial_rows(self, tmp_path):
        comparisons = [
            {'severity_a': 1, 'severity_b': 2, 'n_a': 1, 'n_b': 1},
            {'severity_a': 1, 'severity_b': 3, 'n_a': 4, 'n_b': 4, 'p_value': 0.01, 'mean_a': 1.234},
        ]
        path = reporting.export_statistical_analysis(comparisons, str(tmp_path / "stats.csv"))
        rows = read_csv(path)
        assert rows[0]['p_value'] == ""
        assert rows[1]['p_value'] == "0.0100"
        assert rows[1]['mean_a'] == "1.23"


class TestPlots:

    def test_summary_plots_are_written(self, tmp_path):
        groups = {1: [0.0, 1.0, 2.0], 3: [5.0, 8.0, 13.0]}
        plotting.generate_summary_plots(groups, str(tmp_path))
        assert (tmp_path / "boxplot" / "wait_by_severity.png").exists()
        assert (tmp_path / "boxplot" / "svg" / "wait_by_severity.svg").exists()
        assert (tmp_path / "histograms" / "wait_distribution.png").exists()

    def test_empty_groups_produce_no_plot(self, tmp_path):
        assert plotting.plot_wait_boxplot({}, str(tmp_path)) == (None, None)
        assert plotting.plot_wait_histogram([], str(tmp_path)) == (None, None)


class TestSimulationRunner:

    def test_end_to_end_in_process(self, small_table, tmp_path):
        runner = SimulationRunner(
            small_table, num_simulations=3, duration_minutes=180,
            arrival_rate_per_hour=8.0, treatment_minutes=6,
            output_dir=str(tmp_path), n_jobs=1, verbose=False
        )
        all_results = runner.run()

        assert sorted(all_results) == [0, 1, 2]
        for result in all_results.values():
            assert result['treated'] == result['arrivals']

        csv_dir = tmp_path / "simulation" / "csv"
        assert len(read_csv(csv_dir / "summary_results.csv")) == 3
        assert (csv_dir / "severity_summary.csv").exists()
        assert (csv_dir / "treatment_log_sim_1.csv").exists()
        assert (tmp_path / "simulation" / "plots" / "boxplot" / "wait_by_severity.png").exists()
