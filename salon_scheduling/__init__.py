"""salon_scheduling - Scheduling policy core for salon appointment booking."""

__version__ = "0.1.0"
