from bookcatalog.demo import main


def test_main_returns_zero_and_leaves_no_files(tmp_path, capsys):
    assert main(["--directory", str(tmp_path)]) == 0
    capsys.readouterr()
    assert list(tmp_path.iterdir()) == []


def test_main_catalog_scenarios(tmp_path, capsys):
    main(["--directory", str(tmp_path)])
    out = capsys.readouterr().out
    assert "--- testAddCategoryAndSearch ---" in out
    assert "Category added and found: History" in out
    assert "Category: Science has 2 books." in out
    assert "Found book by Dennis Ritchie: C Programming" in out
    assert "Found book Titled 'Clean Code': Author: Robert C. Martin" in out
    assert "Category 'Health' successfully deleted." in out
    assert "All categories deleted successfully." in out


def test_main_book_list_scenario(tmp_path, capsys):
    main(["--directory", str(tmp_path)])
    out = capsys.readouterr().out
    after = out.split("After deleting 'Book Two':", 1)[1].split("After deleting all books:", 1)[0]
    assert "  - Book One by Author A" in after
    assert "  - Book Three by Author C" in after
    assert "Book Two" not in after
    assert "  Book list is empty." in out


def test_main_author_file_scenario(tmp_path, capsys):
    main(["--directory", str(tmp_path)])
    out = capsys.readouterr().out
    old = tmp_path / "J.R.R. Tolkien_books.bin"
    new = tmp_path / "Tolkien_books.bin"
    assert f"Saved 4 book(s) by J.R.R. Tolkien to {old}" in out
    assert f"Renamed {old} to {new} successfully." in out
    assert f"Imported books from {new} into category 'Imported Tolkien'." in out
    assert f"File {new} deleted successfully." in out
    assert out.rstrip().endswith(f"File {new} not found.")
    hobbit = "  Title: The Hobbit | Author: J.R.R. Tolkien | Publisher: Allen & Unwin | Copies: 5"
    assert out.count(hobbit) == 2


def test_main_reports_failures_for_missing_directory(tmp_path, capsys):
    missing = tmp_path / "missing"
    assert main(["--directory", str(missing)]) == 0
    out = capsys.readouterr().out
    assert f"Failed to create file {missing / 'J.R.R. Tolkien_books.bin'}" in out
    assert f"Failed to open file {missing / 'Tolkien_books.bin'}" in out
    assert "(file may not exist)." in out
    assert "Books in 'Imported Tolkien' category:" not in out