"""Functional tests for the dashcompat CLI."""
