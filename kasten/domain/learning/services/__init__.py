from .mastery import MAX_CARD_LEVEL, MIN_CARD_LEVEL, is_valid_card_level, next_card_level

__all__ = [
    "MAX_CARD_LEVEL",
    "MIN_CARD_LEVEL",
    "is_valid_card_level",
    "next_card_level",
]
