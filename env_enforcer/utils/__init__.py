"""Utility helpers for env-enforcer."""
