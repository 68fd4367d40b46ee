"""
Shared module package.

Contains cross-cutting concerns:
- Error handling and mapping
- Security middleware
- Logging configuration
"""
