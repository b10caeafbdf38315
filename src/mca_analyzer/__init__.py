"""MCA Analyzer - ratio, risk and insight analysis of MCA financial statements."""

__version__ = "0.1.0"
