class TagStagingError(RuntimeError):
    """Base error for mixtape."""


class NoOpenSessionError(TagStagingError):
    """An edit intent arrived for an item with no open edit session."""


class UnknownItemError(TagStagingError):
    """Requested item is not in the item store."""


class TagCatalogError(TagStagingError):
    """A catalog mutation would break the catalog's ordering or uniqueness."""
