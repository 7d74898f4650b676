"""
Infrastructure layer.

The infrastructure layer contains implementations of protocols defined
in the application layer. It handles all external concerns:

- Persistence (database, ORM)
- Web framework (FastAPI, routers)
- Dependency injection

This layer depends on domain and application layers,
but they do not depend on it.
"""
