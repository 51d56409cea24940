"""Milestone aggregation and report rendering."""
