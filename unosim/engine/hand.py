"""A player's hand."""

from typing import Callable, Iterable, Iterator, List, Optional

from unosim.engine.card import Card


class Hand:
    """Cards held by one player, kept in the order they were received."""

    def __init__(self, cards: Iterable[Card] = ()) -> None:
        self._cards: List[Card] = list(cards)

    def append(self, card: Card) -> None:
        self._cards.append(card)

    def find_and_remove(self, predicate: Callable[[Card], bool]) -> Optional[Card]:
        """Remove and return the first card (front to back) matching ``predicate``.

        Returns None and leaves the hand untouched when nothing matches.
        """
        for i, card in enumerate(self._cards):
            if predicate(card):
                return self._cards.pop(i)
        return None

    def is_empty(self) -> bool:
        return not self._cards

    def clear(self) -> None:
        self._cards.clear()

    def cards(self) -> List[Card]:
        """Return a copy of the cards in hand order."""
        return list(self._cards)

    def __len__(self) -> int:
        return len(self._cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(list(self._cards))

    def __repr__(self) -> str:
        return f"Hand({' | '.join(str(c) for c in self._cards)})"
