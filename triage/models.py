from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Patient:
    """A waiting ER patient. Severity is fixed at admission."""
    full_name: str
    injury_type: str
    severity: int
    arrival_time: float  # seconds since the epoch

    @property
    def priority(self) -> Tuple[int, float]:
        """Sort key: lower severity first, then earlier arrival."""
        return (self.severity, self.arrival_time)


@dataclass(frozen=True)
class TreatmentRecord:
    """A treated patient and the moment treatment started."""
    patient: Patient
    treatment_time: float

    @property
    def elapsed_seconds(self) -> float:
        # Negative when the clock went backwards; see TreatmentLog.wait_time_minutes
        return self.treatment_time - self.patient.arrival_time

    @property
    def has_clock_anomaly(self) -> bool:
        return self.elapsed_seconds < 0
