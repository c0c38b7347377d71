"""City and forecast queries, viewer state models, a forecast command and small utilities."""

__version__ = "2.8.0"