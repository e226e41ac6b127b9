"""Learning module domain exceptions."""

from kasten.domain.common.exceptions import ValidationError


class CardIndexOutOfRangeError(ValidationError):
    """Raised when a card index does not address a card of the progress record."""

    def __init__(self, index: int, size: int) -> None:
        super().__init__(
            f"Card index {index} is out of range for a deck with {size} cards",
            field="card_index",
            value=index,
        )
        self.index = index
        self.size = size
