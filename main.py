"""
Main entry point for the ER Triage Queue.
Runs either the interactive console session or the Monte Carlo simulation,
depending on config.json.
"""
import os
import sys

# Ensure project root is in sys.path for module imports
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from config.config import (
    INJURY_TABLE, PACING_SECONDS, SEED_PATIENTS, SEED_PATIENTS_ENABLED,
    SIMULATION_ENABLED, NUM_SIMULATIONS, DURATION_MINUTES, ARRIVAL_RATE_PER_HOUR,
    TREATMENT_MINUTES, N_JOBS, ALPHA_TEST, OUTPUT_DIR, VERBOSE_MODE, LOG_LEVEL
)
from utils.logger import setup_logger

logger = setup_logger(LOG_LEVEL)

def run_interactive():
    from core.er_session import ERSession
    from core.console import ConsoleFrontend

    session = ERSession(INJURY_TABLE)
    console = ConsoleFrontend(session, pacing_seconds=PACING_SECONDS)
    console.run(SEED_PATIENTS if SEED_PATIENTS_ENABLED else ())

def run_simulation():
    from core.simulation_runner import SimulationRunner

    runner = SimulationRunner(
        INJURY_TABLE,
        num_simulations=NUM_SIMULATIONS,
        duration_minutes=DURATION_MINUTES,
        arrival_rate_per_hour=ARRIVAL_RATE_PER_HOUR,
        treatment_minutes=TREATMENT_MINUTES,
        output_dir=OUTPUT_DIR,
        alpha_test=ALPHA_TEST,
        n_jobs=N_JOBS,
        verbose=VERBOSE_MODE
    )
    runner.run()

def main():
    """
    Main orchestrator: decides which mode to run.
    """
    try:
        if SIMULATION_ENABLED:
            run_simulation()
        else:
            run_interactive()

    except (KeyboardInterrupt, EOFError):
        logger.info("\nSession interrupted.")
        sys.exit(130)
    except Exception as e:
        logger.error(f"\n\nFatal error during triage session: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)

if __name__ == "__main__":
    main()
