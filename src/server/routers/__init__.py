"""API routers for the demo server."""
