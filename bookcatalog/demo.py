"""A walkthrough that exercises the catalog and its file operations."""

from __future__ import annotations

import argparse
from pathlib import Path

from bookcatalog.books import Book, delete_all_books, delete_book
from bookcatalog.catalog import Catalog
from bookcatalog.storage import (
    author_filename,
    delete_author_file,
    import_books_from_file,
    list_books_in_file,
    rename_author_file,
    save_books_by_author,
)


def _print_book(book: Book) -> None:
    print(
        f"  Title: {book.title} | Author: {book.author} | "
        f"Publisher: {book.publisher} | Copies: {book.copies}"
    )


def _heading(name: str) -> None:
    print(f"\n--- {name} ---")


def _add_category_and_search() -> None:
    _heading("testAddCategoryAndSearch")
    catalog = Catalog()
    catalog.add_category("History")
    found = catalog.search_category("History")
    if found:
        print(f"Category added and found: {found.name}")


def _add_book_to_category() -> None:
    _heading("testAddBookToCategory")
    catalog = Catalog()
    catalog.add_book("Science", "Physics 101", "Dr. Smith", "SciPub", 3)
    catalog.add_book("Science", "Chemistry Basics", "Dr. Brown", "SciPub", 2)
    category = catalog.search_category("Science")
    if category:
        print(f"Category: {category.name} has {category.books_number()} books.")
    catalog.delete_all_categories()


def _search_book_by_author() -> None:
    _heading("testSearchBookByAuthor")
    catalog = Catalog()
    catalog.add_book("Tech", "C Programming", "Dennis Ritchie", "TechBooks", 5)
    found = catalog.search_book_by_author("Dennis Ritchie")
    if found:
        print(f"Found book by Dennis Ritchie: {found.title}")
    catalog.delete_all_categories()


def _search_book_by_title() -> None:
    _heading("testSearchBookByTitle")
    catalog = Catalog()
    catalog.add_book("Tech", "Clean Code", "Robert C. Martin", "Prentice Hall", 4)
    found = catalog.search_book_by_title("Clean Code")
    if found:
        print(f"Found book Titled 'Clean Code': Author: {found.author}")
    catalog.delete_all_categories()


def _delete_category() -> None:
    _heading("testDeleteCategory")
    catalog = Catalog()
    catalog.add_book("Health", "Yoga Basics", "Yogi Bear", "WellnessPub", 1)
    catalog.delete_category("Health")
    if catalog.search_category("Health") is None:
        print("Category 'Health' successfully deleted.")


def _delete_all_categories() -> None:
    _heading("testDeleteAllCategories")
    catalog = Catalog()
    catalog.add_book("Travel", "Paris Guide", "Rick Steves", "TravelBooks", 2)
    catalog.add_book("Travel", "Tokyo Guide", "Yuki Tanaka", "TravelBooks", 1)
    catalog.delete_all_categories()
    if not catalog:
        print("All categories deleted successfully.")


def _print_book_list(books: list[Book]) -> None:
    for book in books:
        print(f"  - {book.title} by {book.author}")


def _delete_books() -> None:
    _heading("testDeleteBooks")
    books = [
        Book("Book One", "Author A", "Publisher A", 2),
        Book("Book Two", "Author B", "Publisher B", 3),
        Book("Book Three", "Author C", "Publisher C", 1),
    ]
    print("Initial Book List:")
    _print_book_list(books)

    delete_book(books, "Book Two")
    print("\nAfter deleting 'Book Two':")
    _print_book_list(books)

    delete_all_books(books)
    print("\nAfter deleting all books:")
    if not books:
        print("  Book list is empty.")
    else:
        print("  Error: Book list not fully deleted.")


def _save(catalog: Catalog, author: str, directory: Path) -> None:
    path = directory / author_filename(author)
    try:
        count = save_books_by_author(catalog, author, directory)
    except OSError:
        print(f"Failed to create file {path}")
        return
    if count:
        print(f"Saved {count} book(s) by {author} to {path}")
    else:
        print(f"No books found for Author {author}. No file created.")


def _list(path: Path) -> None:
    try:
        books = list_books_in_file(path)
    except OSError:
        print(f"File {path} not found.")
        return
    print(f"Listing books in {path}:")
    for book in books:
        _print_book(book)
    if not books:
        print("No books found in file.")


def _rename(old_author: str, new_author: str, directory: Path) -> None:
    old_path = directory / author_filename(old_author)
    new_path = directory / author_filename(new_author)
    try:
        rename_author_file(old_author, new_author, directory)
    except OSError:
        print(f"Failed to rename {old_path} to {new_path}.")
        return
    print(f"Renamed {old_path} to {new_path} successfully.")


def _import(catalog: Catalog, path: Path, category_name: str) -> None:
    try:
        import_books_from_file(catalog, path, category_name)
    except OSError:
        print(f"Failed to open file {path}")
        return
    print(f"Imported books from {path} into category '{category_name}'.")


def _delete(author: str, directory: Path) -> None:
    path = directory / author_filename(author)
    try:
        delete_author_file(author, directory)
    except OSError:
        print(f"Failed to delete file {path} (file may not exist).")
        return
    print(f"File {path} deleted successfully.")


def _author_file_functions(directory: Path) -> None:
    tolkien = "J.R.R. Tolkien"
    catalog = Catalog()
    catalog.add_book("Fantasy", "The Hobbit", tolkien, "Allen & Unwin", 5)
    catalog.add_book(
        "Fantasy", "The Fellowship of the Ring", tolkien, "George Allen & Unwin", 7
    )
    catalog.add_book("Fantasy", "The Two Towers", tolkien, "George Allen & Unwin", 6)
    catalog.add_book(
        "Fantasy", "The Return of the King", tolkien, "George Allen & Unwin", 8
    )
    catalog.add_book("Sci-Fi", "Dune", "Frank Herbert", "Chilton Books", 4)

    _save(catalog, tolkien, directory)
    _list(directory / author_filename(tolkien))
    _rename(tolkien, "Tolkien", directory)
    _import(catalog, directory / author_filename("Tolkien"), "Imported Tolkien")

    imported = catalog.search_category("Imported Tolkien")
    if imported is not None:
        print("Books in 'Imported Tolkien' category:")
        for book in imported.books:
            _print_book(book)

    _delete("Tolkien", directory)
    _list(directory / author_filename("Tolkien"))
    catalog.delete_all_categories()


def main(argv: list[str] | None = None) -> int:
    """Run the catalog walkthrough, printing what each step does."""
    parser = argparse.ArgumentParser(
        prog="bookcatalog", description="Run the book catalog walkthrough."
    )
    parser.add_argument(
        "--directory",
        default=".",
        help="directory for the author files (default: current directory)",
    )
    args = parser.parse_args(argv)
    directory = Path(args.directory)

    _add_category_and_search()
    _add_book_to_category()
    _search_book_by_author()
    _search_book_by_title()
    _delete_category()
    _delete_all_categories()
    _delete_books()
    _author_file_functions(directory)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())