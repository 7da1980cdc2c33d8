"""
task-tracker - a local command-line task tracker.
"""

__version__ = "0.1.0"
