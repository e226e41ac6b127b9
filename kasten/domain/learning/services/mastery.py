"""
Mastery level rule for a single card.

Each card moves through five levels. A correct answer moves it one level up
until it sits at the top level; a wrong answer sends it back to the bottom.
There is no time component, so answering twice in a row at either end
leaves the level unchanged.
"""

MIN_CARD_LEVEL = 0
MAX_CARD_LEVEL = 4


def is_valid_card_level(level: int) -> bool:
    return isinstance(level, int) and not isinstance(level, bool) and (
        MIN_CARD_LEVEL <= level <= MAX_CARD_LEVEL
    )


def next_card_level(level: int, success: bool) -> int:
    """
    Compute the level a card moves to after an answer.

    Args:
        level: Current level of the card
        success: Whether the learner answered correctly

    Returns:
        min(level + 1, MAX_CARD_LEVEL) on success, MIN_CARD_LEVEL otherwise
    """
    if not success:
        return MIN_CARD_LEVEL
    return min(level + 1, MAX_CARD_LEVEL)
