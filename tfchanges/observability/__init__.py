"""Logging and metrics for tfchanges."""
