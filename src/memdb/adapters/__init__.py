"""Adapters layer - concrete entry points into the database.

Inbound adapters turn external input (statement text, HTTP requests)
into calls on the execution facade.
"""
