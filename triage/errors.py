"""
Error taxonomy for the triage core.

Only table lookups and table construction raise. An empty queue is signalled
with ``None`` and clock skew is reported, never raised.
"""
from dataclasses import dataclass


class TriageError(Exception):
    """Base class for triage errors."""


class UnknownInjury(TriageError):
    """Admission requested with an injury type absent from the severity table."""

    def __init__(self, injury_type):
        self.injury_type = injury_type
        super().__init__(f"Unknown injury type: {injury_type!r}")


class InvalidSeverity(TriageError, ValueError):
    """Severity table entry that is not an integer in the allowed range."""

    def __init__(self, injury_type, severity, low, high):
        self.injury_type = injury_type
        self.severity = severity
        super().__init__(
            f"Severity for {injury_type!r} must be an integer in [{low}, {high}], got {severity!r}"
        )


@dataclass(frozen=True)
class ClockAnomaly:
    """
    A treatment record whose treatment time precedes the patient's arrival.

    Attributes:
        record: the offending TreatmentRecord
        skew_seconds: how far (in seconds) treatment precedes arrival
    """
    record: object
    skew_seconds: float

    def __str__(self):
        patient = self.record.patient
        return (f"Clock anomaly for {patient.full_name}: treated {self.skew_seconds:.2f}s "
                f"before recorded arrival")
