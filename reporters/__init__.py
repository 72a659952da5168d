"""
Reporters package for ND exposure tables.
"""

from .table_reporter import TableReporter, SUPPORTED_FORMATS

__all__ = ['TableReporter', 'SUPPORTED_FORMATS']
