"""User service: a small CRUD API for user records."""
