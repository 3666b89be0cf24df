"""
Evaluation pipeline: exact-hit shortcut, range classification and the
request boundary.
"""

from .evaluator import EvaluationResult, evaluate, find_exact_hit
from .range import EXTRAPOLATION_WARNING, classify_range, range_warning
from .request import EvaluationReport, InterpolationRequest, solve, solve_pairs

__all__ = [
    'EvaluationResult',
    'evaluate',
    'find_exact_hit',
    'EXTRAPOLATION_WARNING',
    'classify_range',
    'range_warning',
    'EvaluationReport',
    'InterpolationRequest',
    'solve',
    'solve_pairs',
]
