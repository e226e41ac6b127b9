"""Tests for the card mastery level rule."""

import pytest

from kasten.domain.learning.services.mastery import (
    MAX_CARD_LEVEL,
    MIN_CARD_LEVEL,
    is_valid_card_level,
    next_card_level,
)


class TestNextCardLevel:
    """Test suite for next_card_level."""

    @pytest.mark.parametrize("level", [0, 1, 2, 3, 4])
    def test_success_moves_up_capped(self, level: int) -> None:
        assert next_card_level(level, success=True) == min(level + 1, MAX_CARD_LEVEL)

    @pytest.mark.parametrize("level", [0, 1, 2, 3, 4])
    def test_failure_resets(self, level: int) -> None:
        assert next_card_level(level, success=False) == MIN_CARD_LEVEL

    def test_five_successes_from_zero(self) -> None:
        level = 0
        seen = []
        for _ in range(5):
            level = next_card_level(level, success=True)
            seen.append(level)
        assert seen == [1, 2, 3, 4, 4]

    def test_failure_at_zero_stays_zero(self) -> None:
        assert next_card_level(next_card_level(0, success=False), success=False) == 0


class TestIsValidCardLevel:
    def test_bounds(self) -> None:
        assert is_valid_card_level(0)
        assert is_valid_card_level(4)
        assert not is_valid_card_level(-1)
        assert not is_valid_card_level(5)

    def test_rejects_non_integers(self) -> None:
        assert not is_valid_card_level(True)
        assert not is_valid_card_level(1.0)  # type: ignore[arg-type]
        assert not is_valid_card_level("1")  # type: ignore[arg-type]
