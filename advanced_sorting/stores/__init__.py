"""Data stores for persistence.

Stores handle:
- IMDb Top list: in-memory rank table mirrored to a JSON file
- PostgreSQL: library catalog sessions

No sorting logic in stores - that belongs in services.
"""
