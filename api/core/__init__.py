"""
Shared, cross-cutting code for the API.

`core/` holds the small building blocks every feature uses (DB wiring,
middleware, error handlers, logging). Feature-specific SQL lives in the
feature package (e.g. `products/`).
"""
