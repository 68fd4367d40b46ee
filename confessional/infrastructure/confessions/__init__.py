"""
Infrastructure adapters for the confessions bounded context.
"""
