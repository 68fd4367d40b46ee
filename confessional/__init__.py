"""
Confessional — an anonymous confession board.

Application package root. A small modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - confessions: Submitting and reading anonymous confessions.

Layers:
    - domain: Entities, ports (ABCs), errors.
    - application: Services orchestrating the domain ports.
    - infrastructure: Adapters (database, templates, static files).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
