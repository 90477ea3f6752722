"""
Plotting utilities for wait-time results.
"""

import os
import numpy as np
import matplotlib.pyplot as plt
from typing import Dict, List, Optional, Tuple

from utils.logger import logger

# =============================================================================
# CONSTANTS & CONFIGURATION
# =============================================================================

# Severity 1 (most urgent) to 5 (least urgent)
SEVERITY_COLORS = {
    1: 'lightcoral',
    2: 'lightsalmon',
    3: 'khaki',
    4: 'lightgreen',
    5: 'lightblue'
}

# =============================================================================
# CORE PLOTTING COMPONENTS
# =============================================================================

class PlotConfig:
    """Base configuration for all plots."""
    
    DEFAULT_DPI = 150
    DEFAULT_FIGSIZE = (10, 6)
    
    @staticmethod
    def get_output_paths(output_dir: str, subdir: str, filename: str) -> Tuple[str, str]:
        """
        Returns (png_path, svg_path) for a given plot.
        Creates directories if needed.
        """
        plot_dir = os.path.join(output_dir, subdir)
        os.makedirs(plot_dir, exist_ok=True)
        
        svg_dir = os.path.join(plot_dir, "svg")
        os.makedirs(svg_dir, exist_ok=True)
        
        png_path = os.path.join(plot_dir, f"{filename}.png")
        svg_path = os.path.join(svg_dir, f"{filename}.svg")
        
        return png_path, svg_path
    
    @staticmethod
    def save_and_close(fig, png_path: str, svg_path: str, dpi: int = DEFAULT_DPI):
        """Saves figure to both PNG and SVG, then closes it."""
        fig.tight_layout(pad=0.2)
        fig.savefig(png_path, dpi=dpi)
        fig.savefig(svg_path)
        plt.close(fig)


# =============================================================================
# HIGH-LEVEL PLOTTING FUNCTIONS (PUBLIC API)
# =============================================================================

def plot_wait_boxplot(groups: Dict[int, List[float]], output_dir: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Boxplot of wait times per severity level.
    
    Args:
        groups: {severity: [wait_minutes, ...]}
        output_dir: Output directory
    
    Returns:
        Tuple of (png_path, svg_path)
    """
    data_to_plot = []
    labels = []
    for severity, waits in sorted(groups.items()):
        if waits:
            data_to_plot.append(waits)
            labels.append(f"Severity {severity}")

    if not data_to_plot:
        logger.warning("No valid data for wait-time boxplot")
        return None, None
    
    fig, ax = plt.subplots(figsize=PlotConfig.DEFAULT_FIGSIZE)
    bp = ax.boxplot(data_to_plot, patch_artist=True, showmeans=True)
    ax.set_xticks(range(1, len(labels) + 1))
    ax.set_xticklabels(labels)
    
    for patch, (severity, _) in zip(bp['boxes'], sorted((s, w) for s, w in groups.items() if w)):
        patch.set_facecolor(SEVERITY_COLORS.get(severity, 'lightgray'))
    
    ax.set_ylabel('Wait time (minutes)', fontsize=11)
    ax.set_title("Wait Time by Severity", fontsize=13, fontweight='bold')
    ax.grid(axis='y', linestyle='--', alpha=0.5)
    
    png_path, svg_path = PlotConfig.get_output_paths(output_dir, "boxplot", "wait_by_severity")
    PlotConfig.save_and_close(fig, png_path, svg_path)
    
    return png_path, svg_path


def plot_wait_histogram(waits: List[float], output_dir: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Histogram of all wait times with mean and median markers.
    
    Returns:
        Tuple of (png_path, svg_path)
    """
    if not waits:
        logger.warning("No data for wait-time histogram")
        return None, None
    
    fig, ax = plt.subplots(figsize=PlotConfig.DEFAULT_FIGSIZE)
    
    ax.hist(waits, bins=20, color='steelblue', edgecolor='black',
           alpha=0.8, linewidth=1.2)
    
    mean_val = np.mean(waits)
    ax.axvline(mean_val, color='red', linestyle='--', linewidth=2,
              label=f'Mean: {mean_val:.2f}')
    
    median_val = np.median(waits)
    ax.axvline(median_val, color='darkgreen', linestyle='--', linewidth=2,
              label=f'Median: {median_val:.2f}')
    
    ax.set_xlabel('Wait time (minutes)', fontsize=11)
    ax.set_ylabel('Patients', fontsize=11)
    ax.yaxis.set_major_locator(plt.MaxNLocator(integer=True))
    
    ax.set_title("Wait Time Distribution (all simulations)", fontsize=13, fontweight='bold')
    ax.legend()
    ax.grid(axis='y', linestyle='--', alpha=0.5)
    
    png_path, svg_path = PlotConfig.get_output_paths(output_dir, "histograms", "wait_distribution")
    PlotConfig.save_and_close(fig, png_path, svg_path)
    
    return png_path, svg_path


# =============================================================================
# SUMMARY PLOT GENERATION (ORCHESTRATION)
# =============================================================================

def generate_summary_plots(groups: Dict[int, List[float]], output_dir: str):
    """
    Generates all summary plots for a set of simulations.
    
    Args:
        groups: {severity: [wait_minutes, ...]} pooled across simulations
        output_dir: Output directory
    """
    logger.info("  -> Generating summary plots...")
    
    png_path, _ = plot_wait_boxplot(groups, output_dir)
    if png_path:
        logger.info(f"    - Wait-time boxplot saved to: {png_path}")
    
    all_waits = [w for waits in groups.values() for w in waits]
    png_path, _ = plot_wait_histogram(all_waits, output_dir)
    if png_path:
        logger.info(f"    - Wait-time histogram saved to: {png_path}")
