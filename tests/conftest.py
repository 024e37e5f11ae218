import sys
from pathlib import Path

import pytest


def pytest_configure():
    # This repo uses a src/ layout, so when running tests without an editable
    # install, we add <repo>/src to sys.path.
    repo_root = Path(__file__).resolve().parents[1]
    src_path = str(repo_root / "src")
    if src_path not in sys.path:
        sys.path.insert(0, src_path)


class Recorder:
    """Collects calls made to a collaborator callback."""

    def __init__(self, result=None):
        self.calls = []
        self.result = result

    def __call__(self, *args):
        self.calls.append(args)
        return self.result


@pytest.fixture
def commits():
    return Recorder()


@pytest.fixture
def renders():
    return Recorder()


@pytest.fixture
def catalog():
    from mixtape.staging.catalog import TagCatalog

    return TagCatalog(["rock", "pop", "jazz", "90s"])


@pytest.fixture
def store():
    from mixtape.staging.models import Item, MediaKind
    from mixtape.store.memory import InMemoryItemStore

    return InMemoryItemStore(
        [
            Item(id="1", tags=["rock", "90s"], title="Song", artist="A"),
            Item(id="2", tags=["pop"], title="Clip", kind=MediaKind.VIDEO),
        ]
    )


@pytest.fixture
def controller(catalog, store, commits, renders):
    from mixtape.staging.controller import StagingController

    ctrl = StagingController(catalog, store, commits, renders)
    yield ctrl
    ctrl.close()
