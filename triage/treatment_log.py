"""
Append-only record of completed treatments and the wait times derived from it.
"""
import time
from typing import Callable, Iterator, List, Optional

from utils.logger import logger
from .errors import ClockAnomaly
from .models import Patient, TreatmentRecord


class TreatmentLog:
    """
    Treated patients in treatment order.

    Args:
        clock: zero-argument callable returning the current time in epoch
            seconds. Defaults to the wall clock.
    """

    def __init__(self, clock: Callable[[], float] = time.time):
        self.clock = clock
        self._records: List[TreatmentRecord] = []

    def __len__(self):
        return len(self._records)

    def record_treatment(self, patient: Patient, treatment_time: Optional[float] = None) -> TreatmentRecord:
        if treatment_time is None:
            treatment_time = self.clock()
        record = TreatmentRecord(patient, treatment_time)
        self._records.append(record)
        if record.has_clock_anomaly:
            logger.warning(f"  -> [Warning] {ClockAnomaly(record, -record.elapsed_seconds)}")
        return record

    def wait_time_minutes(self, record: TreatmentRecord) -> float:
        """
        Minutes between arrival and treatment.

        Clock skew (treatment before arrival) is reported by
        clock_anomalies() and yields 0.0 here.
        """
        return max(0.0, record.elapsed_seconds / 60.0)

    def all_records(self) -> Iterator[TreatmentRecord]:
        """Records in treatment order. Each call starts a fresh pass."""
        return iter(tuple(self._records))

    def clock_anomalies(self) -> List[ClockAnomaly]:
        return [ClockAnomaly(r, -r.elapsed_seconds) for r in self._records if r.has_clock_anomaly]
