"""
Infrastructure layer package.

Contains concrete implementations (adapters) of the ports
defined in the domain layer, plus the collaborators the
interface layer renders with: database, templates, static files.
"""
