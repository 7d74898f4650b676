"""
Domain layer.

The domain layer contains the core entities of the application.
It has no dependencies on external frameworks or infrastructure.
"""
