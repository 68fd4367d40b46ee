"""
Application layer for the confessions bounded context.
"""
