import os
import json
from pathlib import Path

from triage.severity_table import InjurySeverityTable

def _load_config() -> dict:
    override_path = os.environ.get('TRIAGE_CONFIG_PATH')
    if override_path:
        candidate = Path(override_path).expanduser()
        if not candidate.is_absolute():
            project_root = Path(__file__).resolve().parent.parent
            candidate = (project_root / candidate).resolve()
        if not candidate.exists():
            raise FileNotFoundError(f"Config override file not found: {candidate}")
        config_path = candidate
    else:
        config_path = Path(__file__).with_name('config.json')
    with config_path.open(encoding='utf-8') as src:
        return json.load(src)

_CONFIG = _load_config()

# --- 1. Injury-Severity Table (read-only for the life of the process) ---
INJURY_TABLE = InjurySeverityTable(_CONFIG['injuries'])

# --- 2. Interactive Session ---
SESSION_CONFIG = _CONFIG.get('session', {})
PACING_SECONDS = SESSION_CONFIG.get('pacing_seconds', 1.5)
SEED_PATIENTS_ENABLED = SESSION_CONFIG.get('seed_patients_enabled', True)

# Backdated admissions used to start a session: offset_seconds before "now"
SEED_PATIENTS = _CONFIG.get('seed_patients', [])

# --- 3. Monte Carlo Simulation ---
SIM_CONFIG = _CONFIG.get('simulation', {})
SIMULATION_ENABLED = SIM_CONFIG.get('enabled', False)
NUM_SIMULATIONS = SIM_CONFIG.get('num_simulations', 30)
DURATION_MINUTES = SIM_CONFIG.get('duration_minutes', 480)
ARRIVAL_RATE_PER_HOUR = SIM_CONFIG.get('arrival_rate_per_hour', 6.0)
TREATMENT_MINUTES = SIM_CONFIG.get('treatment_minutes', 9.0)
N_JOBS = SIM_CONFIG.get('n_jobs', 4)

# --- 4. Experiment / Output ---
EXP_CONFIG = _CONFIG.get('experiment', {})
ALPHA_TEST = EXP_CONFIG.get('alpha_test', 0.05)
OUTPUT_DIR = EXP_CONFIG.get('output_dir', 'results')

# --- Logging Configuration ---
LOGGING_CONFIG = _CONFIG.get('logging', {})
VERBOSE_MODE = LOGGING_CONFIG.get('verbose_mode', True)  # Default: verbose
LOG_LEVEL = LOGGING_CONFIG.get('level', 'INFO')
