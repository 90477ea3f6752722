"""
High-level simulation runner that orchestrates the execution flow.
"""
from joblib import Parallel, delayed
from core.file_manager import FileManager
from core.report_generator import ReportGenerator
from workers.scenario_worker import ScenarioWorker
from utils.logger import logger
import os
import time

class SimulationRunner:
    """
    Runs seeded ER scenarios in parallel and reports wait times by severity.
    """
    
    def __init__(self, severity_table, num_simulations, duration_minutes,
                 arrival_rate_per_hour, treatment_minutes, output_dir="results",
                 alpha_test=0.05, n_jobs=None, verbose=True):
        self.severity_table = severity_table
        self.num_simulations = num_simulations
        self.duration_minutes = duration_minutes
        self.arrival_rate_per_hour = arrival_rate_per_hour
        self.treatment_minutes = treatment_minutes
        self.alpha_test = alpha_test
        self.verbose = verbose
        self.file_manager = FileManager(output_dir)
        self.report_generator = ReportGenerator(verbose=verbose)
        if n_jobs is None:
            n_jobs = max(1, min(10, (os.cpu_count() or 1) - 2))
        self.n_jobs = n_jobs
    
    def run(self):
        """
        Executes all scenarios and generates reports.

        Returns:
            dict: {sim_i: worker result dict}
        """
        output_dirs = self.file_manager.setup_simulation_directories()
        
        logger.info(f"\n{'='*70}")
        logger.info(f"ER TRIAGE SIMULATION - PARALLEL with {self.n_jobs} workers")
        logger.info(f"{'='*70}")
        
        start_time = time.time()
        
        verbose_level = 10 if not self.verbose else 0
        worker = ScenarioWorker(
            self.severity_table, self.duration_minutes,
            self.arrival_rate_per_hour, self.treatment_minutes
        )
        
        results = Parallel(n_jobs=self.n_jobs, verbose=verbose_level)(
            delayed(worker.run)(sim_i) for sim_i in range(self.num_simulations)
        )
        
        all_results = self._aggregate_results(results)
        
        elapsed = time.time() - start_time
        logger.info(f"\nAll {self.num_simulations} simulations completed!")
        
        self.report_generator.generate_simulation_reports(all_results, output_dirs, self.alpha_test)
        
        logger.info(f"\nProcess completed! (Total time: {elapsed:.2f}s). Check the '{self.file_manager.base_dir}' folder.")
        return all_results
    
    def _aggregate_results(self, results):
        """Collects worker results keyed by simulation index."""
        all_results = {}
        for sim_i, sim_result in results:
            all_results[sim_i] = sim_result
            if sim_result['treated'] != sim_result['arrivals']:
                logger.warning(f"  -> [Warning] Sim #{sim_i + 1}: {sim_result['arrivals']} arrivals "
                               f"but {sim_result['treated']} treatments")
        return all_results
