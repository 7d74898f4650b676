"""
Identity bounded context - Application layer.

Contains use cases for user management:
- Commands: Create, Update users
- Queries: List users
"""
