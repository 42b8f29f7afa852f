# Middleware package init
"""
COVID-19 India API — Middleware Package
========================================

What:  Cross-cutting concerns applied to every request.

Middleware Chain (order matters!):
    Request → [Request ID] → [Logging] → [GZip] → [CORS] → Route Handler

    1. Request ID: Generate correlation ID for logging and tracing
    2. Logging: Log request details with the generated request ID
    3. GZip / CORS: Applied by FastAPI's bundled middleware

    The order is reversed for responses, so the request ID header and the
    logged status/duration reflect the final response.

There is deliberately no rate limiter: requests are accepted at whatever
rate they arrive and queue for the single store connection.
"""
