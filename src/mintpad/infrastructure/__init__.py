"""Infrastructure layer - External dependencies and implementations.

This layer contains the HTTP surface (FastAPI routes, request schemas and
dependencies). Domain services are used from here, never the reverse.
"""
