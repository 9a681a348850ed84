"""Internal modules for custom-http.

WARNING: This package contains system-level modules used by the client.
These are not intended for direct use in application code.

Modules:
    connectivity - Online/offline probes
    http - Shared HTTP client configuration
    interceptors - Request and response interceptors
    storage - Token and session stores
"""
