# Middleware package init
"""
Noteful Backend — Middleware Package
======================================

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID first: every later log line can be correlated
    2. Logging: captures status and duration on the way back out
    3. GZip / CORS: FastAPI-provided middleware

    Responses travel back through the chain in reverse order, which is where
    X-Request-ID is attached and the access line is written.
"""
