"""Exceptions raised by the media asset catalog."""


class CatalogError(Exception):
    """Base class for all catalog errors."""


class IngestionError(CatalogError):
    """The asset source could not be read, or returned an invalid payload."""


class CollectionNotFoundError(CatalogError):
    """No collection is registered under the requested id."""


class ClipboardError(CatalogError):
    """The host could not write to the clipboard."""
