"""Entrypoints (inbound adapters) for dashcompat.

Expose the library to the outside world. Parse and validate inputs, call the
public helpers and present results. Library packages must not import from here.
"""
