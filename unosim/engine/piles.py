"""Draw and discard piles."""

from typing import Iterable, Iterator, List, Optional

from unosim.engine.card import Card


class DrawPile:
    """Undealt cards. The top (next card drawn) is the last element."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: List[Card] = list(cards)

    def reset(self, cards: Iterable[Card]) -> None:
        self._cards = list(cards)

    def peek(self) -> Optional[Card]:
        return self._cards[-1] if self._cards else None

    def draw(self) -> Optional[Card]:
        """Pop the top card, or None when the pile is empty."""
        return self._cards.pop() if self._cards else None

    def draw_many(self, count: int) -> List[Card]:
        """Draw up to ``count`` cards; fewer if the pile runs out."""
        drawn: List[Card] = []
        for _ in range(count):
            card = self.draw()
            if card is None:
                break
            drawn.append(card)
        return drawn

    def is_empty(self) -> bool:
        return not self._cards

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))


class DiscardPile:
    """Played cards. The top is the most recently pushed card."""

    def __init__(self) -> None:
        self._cards: List[Card] = []

    def push(self, card: Card) -> None:
        self._cards.append(card)

    def top(self) -> Optional[Card]:
        return self._cards[-1] if self._cards else None

    def clear(self) -> None:
        self._cards.clear()

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))
