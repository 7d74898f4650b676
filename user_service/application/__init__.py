"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. It contains use cases that represent the operations available
to external actors.

This layer contains:
- Use Cases: One orchestrator per operation
- DTOs: Data transfer objects for input
- Protocols: Interfaces for persistence
"""
