# bookcatalog

A small library catalog kept in memory. Books are grouped into named
categories, and the books of one author can be exported to a compact
binary file, listed, renamed, deleted, and imported back into a category.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Using the catalog

```python
from bookcatalog.catalog import Catalog

catalog = Catalog()
catalog.add_book("Science", "Physics 101", "Dr. Smith", "SciPub", 3)
catalog.add_book("Science", "Chemistry Basics", "Dr. Brown", "SciPub", 2)

science = catalog.search_category("Science")
print(science.name, science.books_number())

book = catalog.search_book_by_title("Physics 101")
print(book.author)

catalog.delete_category("Science")
```

- `Catalog.add_book` creates the category when it does not exist yet and
  returns the new `Book`.
- `search_category`, `search_book_by_author` and `search_book_by_title`
  return the first match, or `None`.
- `delete_category` returns the removed `Category`, or `None` when there
  is no category of that name. `delete_all_categories` empties the catalog.
- `books_by_author` returns every book by an author, in catalog order.
- A `Catalog` can be iterated over its categories and has a `len()`.

A `Category` has a `name`, a `books` list, `books_number()` and
`append_book(book)`. For plain lists of books, `bookcatalog.books`
provides `delete_book(books, title)`, which removes and returns the first
book with that title (or `None`), and `delete_all_books(books)`.

### Limits

Each book's title, author and publisher, and each category name, must
encode to fewer than 50 bytes of UTF-8; text fields may not contain NUL
characters, and the number of copies must fit in a signed 32-bit integer.
Anything else raises `ValueError`.

## Author files

Each author's books can be saved to a file named `<author>_books.bin`
(see `storage.author_filename`):

```python
from bookcatalog import storage

storage.save_books_by_author(catalog, "Dr. Smith", ".")
storage.list_books_in_file(storage.author_filename("Dr. Smith"))
storage.rename_author_file("Dr. Smith", "Smith", ".")
storage.import_books_from_file(catalog, "Smith_books.bin", "Imported")
storage.delete_author_file("Smith", ".")
```

- `save_books_by_author` returns how many books were written. When the
  author has no books it writes nothing and removes any existing file.
- `list_books_in_file` returns the books in a file as a list.
- `import_books_from_file` adds each book in the file to the named
  category and returns how many were added.
- `rename_author_file` and `delete_author_file` return the resulting path.

Missing files and other file-system failures raise the usual `OSError`
subclasses, such as `FileNotFoundError`.

Each book is stored as a fixed-size record of `bookcatalog.books.RECORD_SIZE`
bytes; `Book` records can be encoded and decoded directly with
`bookcatalog.books.encode_book` and `bookcatalog.books.decode_books`.
A trailing partial record is ignored when decoding.

## Demo

A walkthrough of every operation, printing what happens at each step:

```
bookcatalog-demo
```

The demo writes and removes its author files in the current directory,
or in the directory given with `--directory`.

## What it does not do

The catalog lives only in memory: there is no way to save or load a whole
catalog, only the per-author files above. There is no interactive program
for managing a catalog; the only command is the demo walkthrough.