"""
Display rows for the presentation layer: waiting patients and treated records.
"""
from datetime import datetime

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"

def readable_timestamp(epoch_seconds):
    """Formats epoch seconds as local 'YYYY-MM-DD HH:MM:SS'."""
    return datetime.fromtimestamp(epoch_seconds).strftime(TIMESTAMP_FORMAT)

def patient_row(patient):
    return {
        'name': patient.full_name,
        'injury': patient.injury_type,
        'severity': patient.severity,
        'check_in': readable_timestamp(patient.arrival_time),
    }

def record_row(record, wait_minutes):
    patient = record.patient
    return {
        'name': patient.full_name,
        'injury': patient.injury_type,
        'severity': patient.severity,
        'wait_minutes': f"{wait_minutes:.2f}",
        'clock_anomaly': record.has_clock_anomaly,
    }

def describe_patient(patient):
    """One-line description used by admission and treatment messages."""
    return (f"{patient.full_name} (Injury: {patient.injury_type}, Severity: {patient.severity}, "
            f"Check-in: {readable_timestamp(patient.arrival_time)})")
