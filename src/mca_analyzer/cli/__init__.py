"""Command-line interface for MCA Analyzer."""
