"""
Query and aggregation operations over book collections.

Every function takes the whole collection and returns a newly built
result; the input is never modified.
"""

import math
from itertools import chain
from typing import Callable, Dict, Iterator, List, Optional, Set

import jmespath
from jmespath.exceptions import JMESPathError

from .config import QueryConfig
from .exceptions import InvalidExpression, InvalidOperation
from .models import Book, BookCollection, PricePartition

DEFAULT_CONFIG = QueryConfig()


def total_price(books: BookCollection) -> float:
    """Sum of all book prices (0.0 for an empty collection)."""
    return math.fsum(book.price for book in books)


def unique_author_count(books: BookCollection) -> int:
    """Number of distinct author strings."""
    return len({book.author for book in books})


def title_to_reviews(books: BookCollection) -> Dict[str, List[str]]:
    """
    Map each title to its reviews.

    Titles are not required to be unique: a later book with the same
    title replaces the earlier one's reviews.
    """
    return {book.title: list(book.reviews) for book in books}


def title_to_reviews_non_empty(books: BookCollection) -> Dict[str, List[str]]:
    """Like title_to_reviews, keeping only books that have reviews."""
    return {book.title: list(book.reviews) for book in books if book.reviews}


def all_reviews_distinct(books: BookCollection) -> List[str]:
    """All reviews across books, without duplicates, in first-seen order."""
    return list(dict.fromkeys(chain.from_iterable(book.reviews for book in books)))


def average_price(books: BookCollection) -> float:
    """
    Arithmetic mean of book prices.

    Raises:
        InvalidOperation: If the collection is empty
    """
    if not books:
        raise InvalidOperation("Cannot compute the average price of an empty collection")
    return math.fsum(book.price for book in books) / len(books)


def all_authors_tagged(books: BookCollection,
                       config: QueryConfig = DEFAULT_CONFIG) -> bool:
    """True if every author starts with the configured prefix."""
    return all(book.author.startswith(config.author_prefix) for book in books)


def first_three_titles_as_set(books: BookCollection,
                              config: QueryConfig = DEFAULT_CONFIG) -> Set[str]:
    """
    Titles of the first books in input order, as a set.

    Only the first ``config.title_sample_size`` positions (3 by default)
    are looked at, so duplicate titles among them give a smaller set.
    """
    return {book.title for book in books[:config.title_sample_size]}


def _ends_with_even_digit(book: Book, position: int) -> bool:
    if not book.title:
        raise InvalidOperation(
            f"Book at position {position} has an empty title; cannot inspect its last character"
        )
    last_char = book.title[-1]
    return last_char.isdecimal() and int(last_char) % 2 == 0


def cheap_books_with_even_last_digit(books: BookCollection,
                                     config: QueryConfig = DEFAULT_CONFIG) -> List[Book]:
    """
    Books whose title ends with an even digit and that cost less than
    ``config.cheap_price_limit``.

    Titles ending with anything but a digit are skipped.

    Raises:
        InvalidOperation: If any book has an empty title
    """
    return [
        book for position, book in enumerate(books)
        if _ends_with_even_digit(book, position) and book.price < config.cheap_price_limit
    ]


def partition_by_price_threshold(books: BookCollection,
                                 config: QueryConfig = DEFAULT_CONFIG) -> PricePartition:
    """
    Split books into "OK" (price below the threshold) and "Not Ok".

    Both groups are always present and keep the input order.
    """
    ok, not_ok = [], []
    for book in books:
        if book.price < config.partition_threshold:
            ok.append(book)
        else:
            not_ok.append(book)
    return PricePartition(ok=tuple(ok), not_ok=tuple(not_ok))


def books_recommended(books: BookCollection,
                      config: QueryConfig = DEFAULT_CONFIG) -> List[Book]:
    """Books with at least one review mentioning the recommend keyword (any case)."""
    keyword = config.recommend_keyword.lower()
    return [
        book for book in books
        if any(keyword in review.lower() for review in book.reviews)
    ]


def cheapest_book(books: BookCollection) -> Optional[Book]:
    """
    The book with the lowest price, or None for an empty collection.

    On ties the first such book in input order wins.
    """
    return min(books, key=lambda book: book.price, default=None)


def search_books(books: BookCollection, expression: str) -> List[Book]:
    """
    Select books with a JMESPath expression.

    The expression is evaluated against the list of ``Book.to_dict()``
    views, e.g. ``[?price < `50`]`` or ``[?contains(author, 'Иванов')]``.
    Books whose view is part of the result are returned in input order;
    projections that do not yield the views themselves select nothing.

    Raises:
        InvalidExpression: If the expression cannot be compiled or evaluated
    """
    views = [book.to_dict() for book in books]
    try:
        result = jmespath.search(expression, views)
    except JMESPathError as e:
        raise InvalidExpression(f"Invalid search expression {expression!r}: {e}") from e

    if not isinstance(result, list):
        return []
    selected = {id(item) for item in result}
    return [book for book, view in zip(books, views) if id(view) in selected]


class BookQueries:
    """
    Query interface bound to one book collection.

    Example usage:
        queries = BookQueries(books)

        queries.total_price()
        queries.partition_by_price_threshold()["OK"]

        # Chain a filter before aggregating
        (queries.filter(lambda b: b.author.startswith("Автор"))
            .average_price())
    """

    def __init__(self, books: BookCollection, config: Optional[QueryConfig] = None):
        self._books = tuple(books)
        self.config = config or DEFAULT_CONFIG

    def __len__(self) -> int:
        return len(self._books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def filter(self, predicate: Callable[[Book], bool]) -> 'BookQueries':
        """Narrow to books matching predicate (chainable)."""
        return BookQueries([book for book in self._books if predicate(book)], self.config)

    def search(self, expression: str) -> 'BookQueries':
        """Narrow to books selected by a JMESPath expression (chainable)."""
        return BookQueries(search_books(self._books, expression), self.config)

    def total_price(self) -> float:
        return total_price(self._books)

    def unique_author_count(self) -> int:
        return unique_author_count(self._books)

    def title_to_reviews(self) -> Dict[str, List[str]]:
        return title_to_reviews(self._books)

    def title_to_reviews_non_empty(self) -> Dict[str, List[str]]:
        return title_to_reviews_non_empty(self._books)

    def all_reviews_distinct(self) -> List[str]:
        return all_reviews_distinct(self._books)

    def average_price(self) -> float:
        return average_price(self._books)

    def all_authors_tagged(self) -> bool:
        return all_authors_tagged(self._books, self.config)

    def first_three_titles_as_set(self) -> Set[str]:
        return first_three_titles_as_set(self._books, self.config)

    def cheap_books_with_even_last_digit(self) -> List[Book]:
        return cheap_books_with_even_last_digit(self._books, self.config)

    def partition_by_price_threshold(self) -> PricePartition:
        return partition_by_price_threshold(self._books, self.config)

    def books_recommended(self) -> List[Book]:
        return books_recommended(self._books, self.config)

    def cheapest_book(self) -> Optional[Book]:
        return cheapest_book(self._books)
