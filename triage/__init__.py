"""
Triage core: injury severity table, priority queue of waiting patients and
the append-only treatment log.
"""
from .errors import TriageError, UnknownInjury, InvalidSeverity, ClockAnomaly
from .models import Patient, TreatmentRecord
from .severity_table import InjurySeverityTable
from .triage_queue import TriageQueue
from .treatment_log import TreatmentLog

__all__ = [
    'TriageError', 'UnknownInjury', 'InvalidSeverity', 'ClockAnomaly',
    'Patient', 'TreatmentRecord', 'InjurySeverityTable',
    'TriageQueue', 'TreatmentLog'
]
