"""FastAPI application, routes and response helpers."""
