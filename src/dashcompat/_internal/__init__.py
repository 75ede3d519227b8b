"""Internal building blocks shared by the public helper packages.

Nothing here is public API except the two values re-exported from the top
level package: `UNDEFINED` and `Symbol`.
"""
