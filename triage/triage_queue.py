"""
Priority queue of waiting patients.

Patients are kept in a binary heap keyed by (severity, arrival_time, sequence).
The sequence number is the admission counter: it breaks exact ties in favour
of the patient admitted first and keeps Patient objects out of comparisons.
"""
import heapq
import itertools
from typing import Iterator, List, Optional, Tuple

from .models import Patient
from .severity_table import InjurySeverityTable

_HeapEntry = Tuple[int, float, int, Patient]


class TriageQueue:
    """
    Waiting list ordered by severity (ascending), then arrival time (ascending).
    """

    def __init__(self, severity_table: InjurySeverityTable):
        self.severity_table = severity_table
        self._heap: List[_HeapEntry] = []
        self._counter = itertools.count()

    def __len__(self):
        return len(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def admit(self, name: str, injury_type: str, arrival_time: float) -> Patient:
        """
        Admits a patient, deriving severity from the injury table.

        Raises:
            UnknownInjury: if injury_type is not in the table. Nothing is inserted.
        """
        severity = self.severity_table.severity_of(injury_type)
        patient = Patient(name, injury_type, severity, arrival_time)
        heapq.heappush(self._heap, (severity, arrival_time, next(self._counter), patient))
        return patient

    def extract_next(self) -> Optional[Patient]:
        """Removes and returns the highest-priority patient, or None when empty."""
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[-1]

    def peek_ordered(self) -> Iterator[Patient]:
        """
        Iterates every waiting patient in treatment order without touching the queue.

        The heap is copied at call time; later admissions or extractions are
        not reflected in the returned iterator.
        """
        return _drain(list(self._heap))


def _drain(heap: List[_HeapEntry]) -> Iterator[Patient]:
    while heap:
        yield heapq.heappop(heap)[-1]
