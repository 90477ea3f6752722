"""
Module for generating random ER arrivals for Monte Carlo scenarios.
Arrivals follow a Poisson process (exponential inter-arrival times).
"""
import numpy as np

def generate_arrivals(injuries, duration_minutes, arrival_rate_per_hour, start_time=0.0, seed=None):
    """
    Generates patient arrivals over a time window.

    Args:
        injuries: list of injury names to draw from (uniformly)
        duration_minutes: length of the arrival window
        arrival_rate_per_hour: mean number of arrivals per hour
        start_time: epoch seconds at which the window opens
        seed: seed for reproducibility
    
    Returns:
        list: dicts with 'name', 'injury' and 'arrival_time' (epoch seconds),
        sorted by arrival time
    """
    if not injuries:
        raise ValueError("Cannot generate arrivals without any injury types")
    if arrival_rate_per_hour <= 0 or duration_minutes <= 0:
        return []

    rng = np.random.RandomState(seed)
    mean_gap_seconds = 3600.0 / arrival_rate_per_hour
    window_end = start_time + duration_minutes * 60.0

    arrivals = []
    t = start_time
    while True:
        t += rng.exponential(mean_gap_seconds)
        if t >= window_end:
            break
        arrivals.append({
            'name': f"Patient {len(arrivals) + 1:03d}",
            'injury': injuries[rng.randint(len(injuries))],
            'arrival_time': float(t)
        })

    return arrivals
