"""
Books API: Routes Package
===========================

Route Inventory:
    - books.py:  GET/POST /books, GET/PUT/DELETE /books/{book_id}

Routes stay thin: read path and body, call BookService, return the result.
"""
