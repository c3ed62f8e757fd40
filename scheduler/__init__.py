"""Nightly plan refresh runner."""
