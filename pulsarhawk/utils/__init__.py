"""Utility helpers for pulsarhawk."""
