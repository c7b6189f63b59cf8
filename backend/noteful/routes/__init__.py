# Routes package init
"""
Noteful Backend — API Routes Package
======================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - folders.py: GET/POST /api/folders, GET/PATCH/DELETE /api/folders/{id}
    - notes.py:   GET/POST /api/notes,   GET/PATCH/DELETE /api/notes/{id}
    - health.py:  GET /health

Design Principle:
    Routes should be THIN — they handle HTTP concerns only:
    - Parse the request body into a request DTO
    - Call the appropriate service
    - Set the status code and headers (Location on create)

    Validation, queries and not-found detection belong in services.
"""
