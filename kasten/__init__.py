"""
kasten - study progress over flashcard decks.

Tracks, per user and deck, a mastery level for every card and keeps it in a
CouchDB database whose views index the records by user, deck and card.
"""

__version__ = "0.1.0"
