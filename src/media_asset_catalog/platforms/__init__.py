"""Platform implementations for the catalog.

This package contains self-contained platform modules, each providing an
asset source and the collection factory built on it.

Each platform module auto-registers itself with the CollectionRegistry
when imported.
"""

# Platform modules are imported dynamically by CollectionRegistry.discover_platforms()
# to handle missing dependencies gracefully
