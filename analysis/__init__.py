"""Pitch command and workload analysis."""
