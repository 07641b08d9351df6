"""Transformations over expression trees."""

from .differentiator import differentiate
from .simplifier import simplify
from .evaluator import evaluate, evaluate_batch

__all__ = ['differentiate', 'simplify', 'evaluate', 'evaluate_batch']
