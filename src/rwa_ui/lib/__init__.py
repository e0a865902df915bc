"""
Local library modules shared across the RWA Finance UI.

Modules:
    logs: Logging utilities
    objects: Object hashing and serialization
    paths: Path utilities
    caches: Disk-based caching with TTL support
    api: REST client for the RWA backend
    clients: Client factories
    wallet: Bridge to the browser's injected wallet provider
"""
