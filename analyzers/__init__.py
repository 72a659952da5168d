"""
Analyzers package for ND exposure tables.
"""

from .combination_builder import CombinationBuilder

__all__ = ['CombinationBuilder']
