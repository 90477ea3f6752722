"""
Replays a list of arrivals against an ER session with a single clinician.

The clinician starts a treatment every `treatment_minutes` while anyone is
waiting; when the queue runs dry they idle until the next arrival. Once the
arrival window closes the remaining queue is drained.
"""
from core.er_session import ERSession

class SimulatedClock:
    """Manually advanced clock, in epoch seconds."""

    def __init__(self, start=0.0):
        self.current = float(start)

    def __call__(self):
        return self.current

    def advance_to(self, t):
        if t < self.current:
            raise ValueError(f"Simulated clock cannot move backwards ({t} < {self.current})")
        self.current = float(t)


def run_scenario(severity_table, arrivals, treatment_minutes, start_time=0.0):
    """
    Runs one scenario to completion.

    Args:
        severity_table: InjurySeverityTable for the session
        arrivals: dicts with 'name', 'injury', 'arrival_time', sorted by arrival_time
        treatment_minutes: fixed time a treatment occupies the clinician
        start_time: clock value when the clinician comes on shift

    Returns:
        ERSession: the finished session (empty queue, full treatment log)
    """
    clock = SimulatedClock(start_time)
    session = ERSession(severity_table, clock=clock, verbose=False)
    treatment_seconds = treatment_minutes * 60.0

    clinician_free_at = float(start_time)
    i, n = 0, len(arrivals)

    while i < n or not session.is_empty():
        # Idle clinician jumps ahead to the next arrival
        if session.is_empty() and arrivals[i]['arrival_time'] > clinician_free_at:
            clinician_free_at = arrivals[i]['arrival_time']

        while i < n and arrivals[i]['arrival_time'] <= clinician_free_at:
            arrival = arrivals[i]
            session.admit(arrival['name'], arrival['injury'], arrival['arrival_time'])
            i += 1

        clock.advance_to(clinician_free_at)
        session.treat_next()
        clinician_free_at += treatment_seconds

    return session
