import pytest

from mixtape.errors import TagCatalogError
from mixtape.staging.catalog import CatalogAction, CatalogChange, TagCatalog


def test_catalog_is_ordered_and_duplicate_free():
    catalog = TagCatalog(["rock", "pop", "rock", "jazz"])

    assert catalog.tags == ("rock", "pop", "jazz")
    assert list(catalog) == ["rock", "pop", "jazz"]
    assert len(catalog) == 3
    assert "pop" in catalog
    assert "Pop" not in catalog


def test_catalog_mutations_notify_listeners():
    catalog = TagCatalog(["rock"])
    seen = []
    catalog.subscribe(seen.append)

    assert catalog.add("pop") is True
    assert catalog.add("pop") is False
    assert catalog.remove("rock") is True
    assert catalog.remove("rock") is False
    catalog.rename("pop", "synthpop")
    catalog.replace(["a", "b", "a"])

    assert seen == [
        CatalogChange(CatalogAction.ADDED, "pop"),
        CatalogChange(CatalogAction.REMOVED, "rock"),
        CatalogChange(CatalogAction.RENAMED, "pop", "synthpop"),
        CatalogChange(CatalogAction.REPLACED),
    ]
    assert catalog.tags == ("a", "b")


def test_rename_keeps_position_and_rejects_conflicts():
    catalog = TagCatalog(["rock", "pop", "jazz"])
    catalog.rename("pop", "synthpop")
    assert catalog.tags == ("rock", "synthpop", "jazz")

    with pytest.raises(TagCatalogError):
        catalog.rename("missing", "x")
    with pytest.raises(TagCatalogError):
        catalog.rename("rock", "jazz")


def test_listeners_see_the_updated_catalog():
    catalog = TagCatalog(["rock"])
    snapshots = []
    catalog.subscribe(lambda change: snapshots.append(catalog.tags))

    catalog.add("pop")

    assert snapshots == [("rock", "pop")]


def test_unsubscribe_stops_notifications():
    catalog = TagCatalog()
    seen = []
    unsubscribe = catalog.subscribe(seen.append)
    unsubscribe()
    unsubscribe()

    catalog.add("rock")

    assert seen == []
