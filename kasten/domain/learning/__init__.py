"""
Learning bounded context - Domain layer.

This context handles per-user study progress over decks ("Kasten"):
- Progress records with one mastery level per card
- The level rule applied on every answer

Aggregates:
- Progress: One learner's card levels for one deck
"""
