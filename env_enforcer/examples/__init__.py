"""Example applications wired to env-enforcer."""
