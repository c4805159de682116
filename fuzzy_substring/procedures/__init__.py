"""Caller-side procedures built on the fuzzy matching core."""
