"""
File and directory management for simulation output.
"""
import os
from utils.logger import logger

class FileManager:
    """
    Manages the creation and organization of output directories.
    """
    
    PLOT_SUBDIRS = ['boxplot', 'histograms']

    def __init__(self, base_dir="results"):
        self.base_dir = base_dir
    
    def setup_simulation_directories(self):
        """
        Creates the directory structure for Monte Carlo runs.
        
        Returns:
            dict: Paths to csv and plots directories
        """
        experiment_dir = os.path.join(self.base_dir, "simulation")
        
        output_dirs = {
            "csv": os.path.join(experiment_dir, "csv"),
            "plots": os.path.join(experiment_dir, "plots")
        }
        
        for path in output_dirs.values():
            os.makedirs(path, exist_ok=True)
        
        for subdir in self.PLOT_SUBDIRS:
            os.makedirs(os.path.join(output_dirs['plots'], subdir), exist_ok=True)
        
        logger.info(f"Output directory: {experiment_dir}")
        logger.info(f"   - CSV files: {output_dirs['csv']}")
        logger.info(f"   - Plots: {output_dirs['plots']}")
        
        return output_dirs
