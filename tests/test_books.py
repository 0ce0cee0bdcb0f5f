import pytest

from bookcatalog.books import (
    FIELD_SIZE,
    RECORD_SIZE,
    Book,
    decode_books,
    delete_all_books,
    delete_book,
    encode_book,
)


@pytest.fixture
def book_list():
    return [
        Book("Book One", "Author A", "Publisher A", 2),
        Book("Book Two", "Author B", "Publisher B", 3),
        Book("Book Three", "Author C", "Publisher C", 1),
    ]


def test_record_size_matches_native_layout():
    data = encode_book(Book("", "", "", 0))
    assert len(data) == 168
    assert RECORD_SIZE == len(data)


def test_encoded_record_has_fixed_size():
    book = Book("Dune", "Frank Herbert", "Chilton Books", 4)
    assert len(encode_book(book)) == RECORD_SIZE


def test_encoded_title_is_nul_padded_at_start():
    data = encode_book(Book("Dune", "Frank Herbert", "Chilton Books", 4))
    assert data[:FIELD_SIZE] == b"Dune".ljust(FIELD_SIZE, b"\0")


def test_round_trip_single():
    book = Book("The Hobbit", "J.R.R. Tolkien", "Allen & Unwin", 5)
    assert list(decode_books(encode_book(book))) == [book]


def test_round_trip_many(book_list):
    data = b"".join(encode_book(b) for b in book_list)
    assert list(decode_books(data)) == book_list


def test_round_trip_negative_copies():
    book = Book("T", "A", "P", -7)
    assert list(decode_books(encode_book(book))) == [book]


def test_decode_ignores_partial_record(book_list):
    data = b"".join(encode_book(b) for b in book_list)
    assert list(decode_books(data[:-1])) == book_list[:2]


def test_decode_empty():
    assert list(decode_books(b"")) == []


def test_field_limit_accepts_49_bytes():
    title = "x" * (FIELD_SIZE - 1)
    book = Book(title, "A", "P", 1)
    assert list(decode_books(encode_book(book)))[0].title == title


@pytest.mark.parametrize("field", ["title", "author", "publisher"])
def test_field_too_long_raises(field):
    values = {"title": "T", "author": "A", "publisher": "P"}
    values[field] = "x" * FIELD_SIZE
    with pytest.raises(ValueError):
        Book(copies=1, **values)


def test_copies_out_of_range_raises():
    with pytest.raises(ValueError):
        Book("T", "A", "P", 2**31)


def test_delete_middle_book(book_list):
    removed = delete_book(book_list, "Book Two")
    assert removed.title == "Book Two"
    assert [b.title for b in book_list] == ["Book One", "Book Three"]


def test_delete_first_book(book_list):
    delete_book(book_list, "Book One")
    assert [b.title for b in book_list] == ["Book Two", "Book Three"]


def test_delete_missing_book_is_noop(book_list):
    assert delete_book(book_list, "Nope") is None
    assert len(book_list) == 3


def test_delete_only_first_match():
    books = [Book("Same", "A", "P", 1), Book("Same", "B", "P", 2)]
    delete_book(books, "Same")
    assert [b.author for b in books] == ["B"]


def test_delete_all_books(book_list):
    delete_all_books(book_list)
    assert book_list == []