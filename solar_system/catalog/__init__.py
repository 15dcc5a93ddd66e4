"""
Catalog package for the planet catalogue API.

This package contains the ``Planet`` schema, the store adapters that read
planets from DynamoDB (or from memory) and the read-only routes that
expose them as JSON.
"""

from .router import router as catalog_router  # noqa: F401
