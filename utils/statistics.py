# /utils/statistics.py
"""
Module for statistical analysis of treatment wait times.
"""
import numpy as np
from scipy import stats
from itertools import combinations

def _effect_magnitude_r(r):
    """Classifies rank-biserial correlation effect magnitude into common bins."""
    ar = abs(r)
    if ar >= 0.5: return 'large'
    if ar >= 0.3: return 'medium'
    if ar >= 0.1: return 'small'
    return 'trivial'

def group_waits_by_severity(severities, waits):
    """Returns {severity: [wait_minutes, ...]} with severities in ascending order."""
    groups = {}
    for severity, wait in zip(severities, waits):
        groups.setdefault(int(severity), []).append(float(wait))
    return dict(sorted(groups.items()))

def summarize_waits(waits):
    """
    Descriptive statistics for a list of wait times (minutes).

    Returns:
        dict: count, mean, median, std, p90, max (zeros when empty)
    """
    data = np.asarray(waits, dtype=float)
    if data.size == 0:
        return {'count': 0, 'mean': 0.0, 'median': 0.0, 'std': 0.0, 'p90': 0.0, 'max': 0.0}
    return {
        'count': int(data.size),
        'mean': float(np.mean(data)),
        'median': float(np.median(data)),
        'std': float(np.std(data, ddof=1)) if data.size > 1 else 0.0,
        'p90': float(np.percentile(data, 90)),
        'max': float(np.max(data)),
    }

def summarize_by_severity(severities, waits):
    """Per-severity summaries keyed by severity level."""
    return {sev: summarize_waits(group) for sev, group in group_waits_by_severity(severities, waits).items()}

def perform_u_test_mannwhitney(groups, alpha, verbose=True):
    """
    Runs the Mann-Whitney U test for every pair of severity levels.

    Args:
        groups: {severity: [wait_minutes, ...]}
        alpha: significance level
    """
    keys = list(groups.keys())
    comparison_results = []

    for key_a, key_b in combinations(keys, 2):
        data_a = np.asarray(groups[key_a], dtype=float)
        data_b = np.asarray(groups[key_b], dtype=float)

        result = {
            'severity_a': key_a, 'severity_b': key_b,
            'n_a': len(data_a), 'n_b': len(data_b)
        }

        if len(data_a) < 2 or len(data_b) < 2:
            if verbose:
                print(f"\nComparison severity {key_a} vs {key_b}: Not enough valid data.")
            comparison_results.append(result)
            continue
            
        u_stat, p_value = stats.mannwhitneyu(data_a, data_b, alternative='two-sided')
        rank_biserial_corr = 1 - (2 * u_stat) / (len(data_a) * len(data_b))

        result.update({
            'mean_a': np.mean(data_a), 'std_a': np.std(data_a, ddof=1),
            'mean_b': np.mean(data_b), 'std_b': np.std(data_b, ddof=1),
            'u_stat': u_stat, 'p_value': p_value,
            'rank_biserial_r': rank_biserial_corr,
            'effect_magnitude': _effect_magnitude_r(rank_biserial_corr),
            'is_significant': bool(p_value < alpha),
            'shorter_wait': key_a if np.mean(data_a) < np.mean(data_b) else key_b
        })
        comparison_results.append(result)
        
        if verbose:
            print(f"\n--- Comparison: severity {key_a} vs severity {key_b} ---")
            print(f"  - Severity {key_a}: Mean wait={result['mean_a']:.2f} min, N={result['n_a']}")
            print(f"  - Severity {key_b}: Mean wait={result['mean_b']:.2f} min, N={result['n_b']}")
            
            p_display = '>=0.05' if p_value >= 0.05 else f'{p_value:.4f}'
            print(f"  - Mann-Whitney U Test: p-value = {p_display}")
            
            if result['is_significant']:
                print(f"  - Conclusion: Statistically significant difference. Shorter waits: severity {result['shorter_wait']}.")
            else:
                print("  - Conclusion: No statistically significant difference.")

    return comparison_results
