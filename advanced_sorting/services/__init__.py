"""Business logic services.

Services contain sort-key derivation and sorting, and are called by routes.
Services take their dependencies (library items, RankStore) explicitly.
"""
