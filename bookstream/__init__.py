"""
bookstream - Query and aggregation operations over in-memory book collections.

Main API:
    from bookstream import Book, BookQueries

    books = [
        Book("Sky", "Автор Иванов", 120.0),
        Book("Rain2", "Автор Петров", 45.0, ["рекомендую!"]),
    ]

    # Plain functions
    from bookstream import total_price, cheapest_book
    total_price(books)        # 165.0
    cheapest_book(books)      # Book(title='Rain2', ...)

    # Bound to one collection
    queries = BookQueries(books)
    queries.partition_by_price_threshold()["OK"]
    queries.search("[?price < `100`]").books_recommended()
"""

from .exceptions import BookQueryError, InvalidExpression, InvalidOperation
from .models import Book, BookCollection, PriceLabel, PricePartition
from .queries import (
    BookQueries,
    all_authors_tagged,
    all_reviews_distinct,
    average_price,
    books_recommended,
    cheap_books_with_even_last_digit,
    cheapest_book,
    first_three_titles_as_set,
    partition_by_price_threshold,
    search_books,
    title_to_reviews,
    title_to_reviews_non_empty,
    total_price,
    unique_author_count,
)

__version__ = "0.1.0"
__all__ = [
    "Book",
    "BookCollection",
    "BookQueries",
    "BookQueryError",
    "InvalidExpression",
    "InvalidOperation",
    "PriceLabel",
    "PricePartition",
    "all_authors_tagged",
    "all_reviews_distinct",
    "average_price",
    "books_recommended",
    "cheap_books_with_even_last_digit",
    "cheapest_book",
    "first_three_titles_as_set",
    "partition_by_price_threshold",
    "search_books",
    "title_to_reviews",
    "title_to_reviews_non_empty",
    "total_price",
    "unique_author_count",
]
