"""Internal modules for the Lemmy client.

WARNING: These are not intended for direct use in application code.

Modules:
    backends - Transport backends and the shared request path
    http - Route, header and HTTP client helpers
    registry - Registered response types
"""
