"""
Web collaborators: HTML rendering and static asset lookup.
"""
