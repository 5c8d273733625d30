"""Internal modules for the ActorHub SDK.

WARNING: These modules back the public clients and may change without notice.
Do not import them from application code.

Modules:
    dispatch - Request dispatch, response classification and retry
    http - Shared HTTP client configuration
"""
