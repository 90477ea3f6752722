# /utils/reporting.py
"""
Module for reporting functions: building treatment-log rows and exporting
wait-time results to CSV files.
"""
import csv
import numpy as np

from utils.logger import logger
from utils.statistics import summarize_waits


# ==== Internal Generic Helpers ====

def _format_two_decimals(value):
    """Returns a float formatted to two decimal places, otherwise returns it as is."""
    return f"{value:.2f}" if isinstance(value, (float, np.floating)) else value

def _safe_open_csv(filename):
    """Context manager to safely open CSV files."""
    return open(filename, 'w', newline='', encoding='utf-8')


# ==== Row Builders ====

def treatment_log_rows(treatment_log):
    """
    Flattens a TreatmentLog into CSV-ready dicts, in treatment order.

    Times are reported in minutes from the epoch of the session clock, which
    for simulated scenarios is minutes since the start of the shift.
    """
    rows = []
    for order, record in enumerate(treatment_log.all_records(), start=1):
        patient = record.patient
        rows.append({
            'Order': order,
            'Patient': patient.full_name,
            'Injury': patient.injury_type,
            'Severity': patient.severity,
            'Arrival_min': patient.arrival_time / 60.0,
            'Treated_min': record.treatment_time / 60.0,
            'Wait_min': treatment_log.wait_time_minutes(record),
            'Clock_Anomaly': record.has_clock_anomaly
        })
    return rows


# ==== Low-Level CSV Export Functions ====

def export_treatment_log(rows, filename):
    """Exports treatment-log rows to a CSV file, returning the filename on success."""
    if not rows:
        logger.warning(f"  -> [Warning] No data to export to {filename}.")
        return None
    try:
        with _safe_open_csv(filename) as csvfile:
            writer = csv.DictWriter(csvfile, fieldnames=list(rows[0].keys()))
            writer.writeheader()
            for row in rows:
                writer.writerow({k: _format_two_decimals(v) for k, v in row.items()})
        return filename
    except (IOError, IndexError) as e:
        logger.error(f"  -> [Error] Exporting treatment log to CSV failed: {e}")
        return None

def export_severity_summary(groups, filename):
    """Exports per-severity wait-time statistics, returning the filename on success."""
    try:
        with _safe_open_csv(filename) as f:
            writer = csv.writer(f)
            writer.writerow(['severity', 'patients', 'wait_mean', 'wait_median',
                             'wait_std', 'wait_p90', 'wait_max'])
            for severity, waits in groups.items():
                summary = summarize_waits(waits)
                if not summary['count']:
                    continue
                writer.writerow([
                    severity,
                    summary['count'],
                    _format_two_decimals(summary['mean']),
                    _format_two_decimals(summary['median']),
                    _format_two_decimals(summary['std']),
                    _format_two_decimals(summary['p90']),
                    _format_two_decimals(summary['max'])
                ])
        logger.info(f"    - Severity summary saved to: {filename}")
        return filename
    except IOError as e:
        logger.error(f"  -> [Error] Exporting severity summary failed: {e}")
        return None

def export_montecarlo_summary(all_results, filename):
    """Exports one row per simulated scenario, returning the filename on success."""
    try:
        with _safe_open_csv(filename) as f:
            writer = csv.writer(f)
            writer.writerow(['simulation', 'arrivals', 'treated', 'wait_mean',
                             'wait_max', 'last_treatment_min', 'time_s'])
            for sim_i, result in sorted(all_results.items()):
                waits = result['wait']
                writer.writerow([
                    sim_i + 1,
                    result['arrivals'],
                    result['treated'],
                    _format_two_decimals(np.mean(waits)) if waits else '0.00',
                    _format_two_decimals(np.max(waits)) if waits else '0.00',
                    _format_two_decimals(result['last_treatment_min']),
                    _format_two_decimals(result['time'])
                ])
        logger.info(f"    - Monte Carlo summary saved to: {filename}")
        return filename
    except IOError as e:
        logger.error(f"  -> [Error] Exporting summary failed: {e}")
        return None

def export_statistical_analysis(comparison_results, filename):
    """Exports the detailed results of the pairwise comparison, returning the filename on success."""
    if not comparison_results: return None
    try:
        with _safe_open_csv(filename) as f:
            # Rows without enough data carry fewer keys; use the widest one
            fieldnames = max((list(res.keys()) for res in comparison_results), key=len)
            writer = csv.DictWriter(f, fieldnames=fieldnames, restval='')
            writer.writeheader()
            for row in comparison_results:
                formatted_row = {}
                for k, v in row.items():
                    if k == 'p_value':
                        if isinstance(v, (int, float, np.floating)):
                            formatted_row[k] = '>=0.05' if v >= 0.05 else f"{v:.4f}"
                        else:
                            formatted_row[k] = v
                    else:
                        formatted_row[k] = _format_two_decimals(v)

                writer.writerow(formatted_row)
        logger.info(f"    - Statistical analysis saved to: {filename}")
        return filename
    except (IOError, IndexError) as e:
        logger.error(f"  -> [Error] Exporting analysis failed: {e}")
        return None
