"""
Presentation Layer - API endpoints and request/response handling.

This layer contains:
- api/: FastAPI routers and endpoints
- errors.py: HTTP error taxonomy and exception handlers
- responses.py: success/error envelopes
"""
