"""Output formatters for CVSS2 CLI"""

from .table import TableFormatter
from .json import JSONFormatter
from .csv import CSVFormatter

__all__ = ['TableFormatter', 'JSONFormatter', 'CSVFormatter']
