"""The 78-card tarot catalog.

Cards are built once from the static deck tables and never mutated, so a
catalog can be shared freely without synchronization.
"""

from functools import lru_cache
from typing import Iterable, Optional

from tarot_timer.data.deck import MAJOR_ARCANA, MINOR_ARCANA
from tarot_timer.errors import CardNotFoundError
from tarot_timer.models import Card, LocalizedText, SUITS

CATALOG_SIZE = 78


def _build_card(row: tuple, suit: str, number: int) -> Card:
    """Build a Card from a deck table row."""
    card_id, name_en, name_ko, desc_en, desc_ko, keywords_en, keywords_ko, element = row
    return Card(
        id=card_id,
        name=LocalizedText({"en": name_en, "ko": name_ko}),
        keywords=tuple(
            LocalizedText({"en": en, "ko": ko})
            for en, ko in zip(keywords_en, keywords_ko)
        ),
        description=LocalizedText({"en": desc_en, "ko": desc_ko}),
        suit=suit,
        number=number,
        element=element,
    )


def build_cards() -> tuple[Card, ...]:
    """Build all cards in catalog order: major 0..21, then each suit Ace..King."""
    cards = [_build_card(row, "major", number) for number, row in enumerate(MAJOR_ARCANA)]
    for suit in SUITS[1:]:
        cards.extend(
            _build_card(row, suit, rank)
            for rank, row in enumerate(MINOR_ARCANA[suit], start=1)
        )
    return tuple(cards)


class CardCatalog:
    """Read-only lookup over an ordered set of cards."""

    def __init__(self, cards: Optional[Iterable[Card]] = None):
        """Initialize the catalog.

        Args:
            cards: Cards in catalog order. Defaults to the full 78-card deck.

        Raises:
            ValueError: If card ids are duplicated or the cards disagree on
                their language sets.
        """
        self._cards = tuple(cards) if cards is not None else build_cards()
        self._by_id = {card.id: card for card in self._cards}
        self._index = {card.id: i for i, card in enumerate(self._cards)}

        if len(self._by_id) != len(self._cards):
            raise ValueError("Duplicate card ids in catalog")
        languages = {card.name.languages for card in self._cards}
        if len(languages) > 1:
            raise ValueError("Cards use different language sets")

    def __len__(self) -> int:
        return len(self._cards)

    def __contains__(self, card_id: object) -> bool:
        return card_id in self._by_id

    def get_card(self, card_id: str) -> Card:
        """Get a card by id.

        Raises:
            CardNotFoundError: If the id is not in the catalog.
        """
        try:
            return self._by_id[card_id]
        except (KeyError, TypeError):
            raise CardNotFoundError(f"Unknown card id: {card_id!r}") from None

    def all_cards(self) -> tuple[Card, ...]:
        return self._cards

    def cards_by_suit(self, suit: str) -> tuple[Card, ...]:
        if suit not in SUITS:
            raise ValueError(f"Unknown suit: {suit}")
        return tuple(card for card in self._cards if card.suit == suit)

    def index_of(self, card_id: str) -> int:
        if card_id not in self._index:
            raise CardNotFoundError(f"Unknown card id: {card_id!r}")
        return self._index[card_id]


@lru_cache(maxsize=1)
def get_catalog() -> CardCatalog:
    """Get the process-wide catalog of all 78 cards."""
    return CardCatalog()
