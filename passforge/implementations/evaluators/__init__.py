"""Strength evaluator implementations."""

from passforge.implementations.evaluators.zxcvbn_analysis import ZxcvbnAnalysis

__all__ = ["ZxcvbnAnalysis"]
