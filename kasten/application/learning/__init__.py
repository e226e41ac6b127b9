"""
Learning bounded context - Application layer.

Contains use cases for study progress:
- Queries: Progress by id, by user and deck, by user, by deck, card subjects
- Commands: Create, replace, delete progress, record answers
"""
