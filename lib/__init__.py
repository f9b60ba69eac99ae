# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - database.py: Parameterized SQL client over a bounded connection pool
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.database import DuplicateKeyError, StorageClient, StorageError

__all__ = [
    "DuplicateKeyError",
    "StorageClient",
    "StorageError",
]
