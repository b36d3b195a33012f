# Middleware package init
"""
Bookstore API - Middleware Package
===================================

Middleware Chain:
    Request → [Request ID] → [Logging] → [CORS] → Route Handler

    1. Request ID first so every later log line carries the id
    2. Logging measures the full downstream duration and final status
    3. CORS is FastAPI's CORSMiddleware (handles preflight)
"""
