# Routes package init
"""
Bookstore API - API Routes Package
===================================

Route Inventory:
    - books.py:    /api/books, /api/books/{id}      (GET, POST, PUT, DELETE)
    - authors.py:  /api/authors, /api/authors/{id}  (GET, POST, PUT, DELETE)
    - health.py:   GET /health
    - deps.py:     service factories and the log location label

Routes stay thin: they read path/body, call a service and pick the success
status. Everything else happens in the services and exception handlers.
"""
