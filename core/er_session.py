"""
ER session: one triage queue plus one treatment log, driven by a single clock.
"""
import time

from triage import TriageQueue, TreatmentLog
from utils.formatting import describe_patient, patient_row, record_row
from utils.logger import logger

class ERSession:
    """
    Facade over the admission -> treatment cycle.

    Args:
        severity_table: InjurySeverityTable injected into the queue
        clock: zero-argument callable returning epoch seconds (wall clock by default)
        verbose: log every admission and treatment
    """

    def __init__(self, severity_table, clock=time.time, verbose=True):
        self.clock = clock
        self.verbose = verbose
        self.queue = TriageQueue(severity_table)
        self.log = TreatmentLog(clock=clock)
        self.admitted_count = 0

    @property
    def severity_table(self):
        return self.queue.severity_table

    def admit(self, name, injury_type, arrival_time=None):
        """
        Admits a patient arriving now, or at a backdated arrival_time.

        Raises:
            UnknownInjury: propagated from the queue; nothing is admitted.
        """
        if arrival_time is None:
            arrival_time = self.clock()
        patient = self.queue.admit(name, injury_type, arrival_time)
        self.admitted_count += 1
        if self.verbose:
            logger.info(f"Added patient: {describe_patient(patient)}.")
        return patient

    def seed(self, seed_patients, now=None):
        """
        Admits pre-seeded patients, each backdated by its offset_seconds.

        Args:
            seed_patients: iterable of dicts with 'name', 'injury', 'offset_seconds'
            now: reference time (defaults to the session clock)
        """
        if now is None:
            now = self.clock()
        return [
            self.admit(entry['name'], entry['injury'], now - entry.get('offset_seconds', 0))
            for entry in seed_patients
        ]

    def treat_next(self):
        """
        Treats the highest-priority patient.

        Returns:
            TreatmentRecord, or None when nobody is waiting.
        """
        patient = self.queue.extract_next()
        if patient is None:
            if self.verbose:
                logger.info("Queue is empty. No one left to treat!")
            return None
        record = self.log.record_treatment(patient)
        if self.verbose:
            logger.info(f"Treating patient: {describe_patient(patient)}.")
        return record

    def is_empty(self):
        return self.queue.is_empty()

    def waiting_count(self):
        return len(self.queue)

    def treated_count(self):
        return len(self.log)

    def wait_times(self):
        """Wait times in minutes, in treatment order."""
        return [self.log.wait_time_minutes(r) for r in self.log.all_records()]

    def queue_rows(self):
        return [patient_row(p) for p in self.queue.peek_ordered()]

    def treated_rows(self):
        return [record_row(r, self.log.wait_time_minutes(r)) for r in self.log.all_records()]
