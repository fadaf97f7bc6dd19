"""Run the Books API with `python -m books_api`."""

from books_api.main import run

if __name__ == "__main__":
    run()
