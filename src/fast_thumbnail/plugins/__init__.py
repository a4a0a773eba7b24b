"""Compute task plugins."""
