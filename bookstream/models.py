"""Data models for book records and query results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Sequence, Tuple, Union


@dataclass(frozen=True)
class Book:
    """Immutable book record."""
    title: str
    author: str
    price: float
    reviews: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if isinstance(self.reviews, str):
            raise TypeError("reviews must be a sequence of strings, not a single string")
        # Accept any sequence of reviews but store it immutably
        if not isinstance(self.reviews, tuple):
            object.__setattr__(self, 'reviews', tuple(self.reviews))

    def to_dict(self) -> Dict[str, Any]:
        """Get a plain dictionary view of the record."""
        return {
            'title': self.title,
            'author': self.author,
            'price': self.price,
            'reviews': list(self.reviews),
        }


class PriceLabel(str, Enum):
    """Outcome labels of a price partition."""
    OK = "OK"
    NOT_OK = "Not Ok"


@dataclass(frozen=True)
class PricePartition:
    """
    Books split by a price threshold.

    Always carries exactly two groups: ``ok`` (price below the threshold)
    and ``not_ok`` (the rest). Both keep the input order.
    """
    ok: Tuple[Book, ...] = ()
    not_ok: Tuple[Book, ...] = ()

    def __getitem__(self, label: Union[PriceLabel, str]) -> List[Book]:
        try:
            label = PriceLabel(label)
        except ValueError:
            raise KeyError(label) from None
        if label is PriceLabel.OK:
            return list(self.ok)
        return list(self.not_ok)

    def keys(self) -> Tuple[PriceLabel, PriceLabel]:
        return (PriceLabel.OK, PriceLabel.NOT_OK)

    def __iter__(self) -> Iterator[PriceLabel]:
        return iter(self.keys())

    def __len__(self) -> int:
        return 2

    def to_dict(self) -> Dict[str, List[Book]]:
        """Get the partition as a ``{"OK": [...], "Not Ok": [...]}`` mapping."""
        return {
            PriceLabel.OK.value: list(self.ok),
            PriceLabel.NOT_OK.value: list(self.not_ok),
        }


BookCollection = Sequence[Book]
