"""
Centralizes all report and plot generation logic.
"""
import os
from utils import plotting, reporting, statistics
from utils.logger import logger

class ReportGenerator:
    """
    Generates all reports and plots for simulation results.
    """

    def __init__(self, verbose=True):
        self.verbose = verbose
    
    def generate_simulation_reports(self, all_results, output_dirs, alpha_test):
        """
        Args:
            all_results: {sim_i: worker result dict}
            output_dirs: paths returned by FileManager
            alpha_test: significance level for the pairwise tests
        """
        logger.info(f"\n{'='*70}")
        logger.info("GENERATING SIMULATION REPORTS")
        logger.info(f"{'='*70}")

        severities = [s for result in all_results.values() for s in result['severity']]
        waits = [w for result in all_results.values() for w in result['wait']]
        groups = statistics.group_waits_by_severity(severities, waits)
        
        # CSV summaries
        reporting.export_montecarlo_summary(
            all_results,
            os.path.join(output_dirs["csv"], "summary_results.csv")
        )
        reporting.export_severity_summary(
            groups,
            os.path.join(output_dirs["csv"], "severity_summary.csv")
        )
        
        # Statistical analysis
        pairwise_stats = statistics.perform_u_test_mannwhitney(groups, alpha_test, verbose=self.verbose)
        reporting.export_statistical_analysis(
            pairwise_stats,
            os.path.join(output_dirs["csv"], "statistical_analysis.csv")
        )
        
        # Summary plots
        plotting.generate_summary_plots(groups, output_dirs["plots"])
        
        # Full treatment log of the first scenario as a worked example
        if all_results:
            first_sim = min(all_results)
            path = reporting.export_treatment_log(
                all_results[first_sim]['rows'],
                os.path.join(output_dirs["csv"], f"treatment_log_sim_{first_sim + 1}.csv")
            )
            if path:
                logger.info(f"    - Treatment log (Sim #{first_sim + 1}) saved to: {path}")
        
        logger.info(f"\n{'='*70}")
        logger.info("SIMULATION REPORTS COMPLETE")
        logger.info(f"{'='*70}")

        return groups, pairwise_stats
