"""Routing: declarations in, ordered render/redirect entries out.

Nothing here matches paths; the host router does that with the
resolved entries, in order.
"""
