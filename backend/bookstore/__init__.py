"""
Bookstore API - Application Package
====================================

What:  CRUD HTTP service for a bookstore's Books and Authors.
How:   Layered the same way for both entities:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← paths, status codes, auth
    ├─────────────────────────────────────┤
    │      Services (CRUD handlers)       │  ← validate, check existence, log
    ├──────────────────┬──────────────────┤
    │   Repositories   │      Mapper      │  ← persistence / shape conversion
    ├──────────────────┴──────────────────┤
    │     Models (ORM) & Schemas (DTOs)   │
    ├─────────────────────────────────────┤
    │        Database (Persistence)       │  ← async SQLAlchemy sessions
    └─────────────────────────────────────┘

    Routes only translate HTTP into service calls. Services raise the
    exceptions in `bookstore.exceptions`; the global handlers registered in
    `bookstore.main` turn them into responses.
"""

__version__ = "1.0.0"
