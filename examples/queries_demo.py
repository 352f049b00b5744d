#!/usr/bin/env python3
"""
Demonstration of bookstream queries.
"""

from bookstream import Book, BookQueries, InvalidOperation


def main():
    """Run demo of the query operations."""
    books = [
        Book("Sky", "Автор Иванов", 120.0),
        Book("Rain2", "Автор Петров", 45.0, ["рекомендую!"]),
        Book("Snow4", "Автор Иванов", 60.0, ["Рекомендую", "Так себе"]),
        Book("Leaves", "Сидоров", 30.0, ["Так себе"]),
    ]
    queries = BookQueries(books)

    print(f"Total price:        {queries.total_price()}")
    print(f"Unique authors:     {queries.unique_author_count()}")
    print(f"Average price:      {queries.average_price():.2f}")
    print(f"All authors tagged: {queries.all_authors_tagged()}")
    print(f"First titles:       {sorted(queries.first_three_titles_as_set())}")
    print(f"Distinct reviews:   {queries.all_reviews_distinct()}")

    print("\nCheap books with an even last digit:")
    for book in queries.cheap_books_with_even_last_digit():
        print(f"  {book.title} ({book.price})")

    print("\nPrice partition:")
    partition = queries.partition_by_price_threshold()
    for label in partition:
        print(f"  {label.value}: {[book.title for book in partition[label]]}")

    print("\nRecommended:")
    for book in queries.books_recommended():
        print(f"  {book.title}")

    cheapest = queries.cheapest_book()
    print(f"\nCheapest: {cheapest.title if cheapest else 'none'}")

    tagged = queries.filter(lambda b: b.author.startswith("Автор"))
    print(f"Tagged authors only, total: {tagged.total_price()}")

    empty = queries.search("[?price > `1000`]")
    print(f"Over 1000: {len(empty)} books, cheapest: {empty.cheapest_book()}")
    try:
        empty.average_price()
    except InvalidOperation as e:
        print(f"Average of nothing: {e}")


if __name__ == "__main__":
    main()
