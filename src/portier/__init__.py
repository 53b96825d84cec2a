"""Portier - authentication and profile management.

Layers:
    portier/
    ├── domain/             # User aggregate, value objects, repository ports
    ├── application/        # Auth/profile services, access guard, user context
    ├── infrastructure/     # SQLAlchemy user store
    ├── presentation/       # FastAPI app and Typer CLI
    └── client/             # Client session manager and HTTP client
"""
