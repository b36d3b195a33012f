# Services package init
"""
Bookstore API - Services Layer
===============================

What:  The CRUD handlers sitting between routes (HTTP) and repositories
       (persistence).

Service Inventory:
    - CrudService (generic): list, get, create, update, delete
    - BookService / AuthorService: CrudService bound to one entity
    - Mapper: ORM model ⇄ transfer object conversion
    - failure_boundary / internal_error: turn faults into logged 500s
"""
