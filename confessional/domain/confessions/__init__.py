"""
Confessions bounded context — domain layer.
"""
