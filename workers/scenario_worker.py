"""
Worker for Monte Carlo scenario replications.
"""
import time
from simulation.arrival_generator import generate_arrivals
from simulation.scenario import run_scenario
from utils.reporting import treatment_log_rows

class ScenarioWorker:
    """
    Executes a single seeded scenario.
    """
    
    def __init__(self, severity_table, duration_minutes, arrival_rate_per_hour, treatment_minutes):
        self.severity_table = severity_table
        self.duration_minutes = duration_minutes
        self.arrival_rate_per_hour = arrival_rate_per_hour
        self.treatment_minutes = treatment_minutes
    
    def run(self, sim_i):
        """
        Runs one simulation iteration.
        
        Args:
            sim_i (int): Simulation index, also the arrival seed
        
        Returns:
            tuple: (sim_i, sim_result)
        """
        t0 = time.time()
        arrivals = generate_arrivals(
            self.severity_table.injuries(),
            self.duration_minutes,
            self.arrival_rate_per_hour,
            seed=sim_i
        )
        session = run_scenario(self.severity_table, arrivals, self.treatment_minutes)

        records = list(session.log.all_records())
        sim_result = {
            'arrivals': len(arrivals),
            'treated': len(records),
            'severity': [r.patient.severity for r in records],
            'wait': [session.log.wait_time_minutes(r) for r in records],
            'last_treatment_min': records[-1].treatment_time / 60.0 if records else 0.0,
            'rows': treatment_log_rows(session.log),
            'time': time.time() - t0
        }
        return sim_i, sim_result
