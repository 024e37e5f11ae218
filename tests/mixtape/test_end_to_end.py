import types

import mixtape.tag.io.music_tag_io as io_mod
from mixtape import ChangeLedger, FileTagCommitter, StagingController, TagCatalog
from mixtape.staging.models import Item
from mixtape.store.memory import InMemoryItemStore
from mixtape.tag.io.music_tag_io import MusicTagIO


def test_destructive_remove_reaches_file_immediately(monkeypatch):
    files = {}

    class FakeFile(dict):
        def save(self):
            pass

    def load_file(path):
        return files.setdefault(path, FakeFile())

    monkeypatch.setattr(io_mod, "music_tag", types.SimpleNamespace(load_file=load_file))

    committer = FileTagCommitter(
        {"1": "/music/one.mp3"},
        io=MusicTagIO(field="genre", separator=", ", ensure_virtualdj_compat=False),
    )
    store = InMemoryItemStore([Item(id="1", tags=["rock", "90s"])])
    ctrl = StagingController(TagCatalog(["rock", "pop", "90s"]), store, committer)

    ctrl.start_edit("1")
    ctrl.remove("1", "rock")
    ctrl.cancel("1")

    assert store.get("1").tags == ["rock", "90s"]
    assert committer.read_tags("1") == ["90s"]

    ctrl.start_edit("1")
    ctrl.apply("1")
    assert committer.read_tags("1") == ["rock", "90s"]


def test_ledger_collects_commits_until_saved():
    ledger = ChangeLedger()
    store = InMemoryItemStore([Item(id="1", tags=["rock"]), Item(id="2")])
    ctrl = StagingController(TagCatalog(["rock", "pop"]), store, ledger)

    ctrl.start_edit("1")
    ctrl.remove("1", "rock")
    ctrl.add("1", "pop")
    ctrl.apply("1")
    ctrl.start_edit("2")
    ctrl.add("2", "rock")
    ctrl.cancel("2")

    assert ledger.description() == "1 tag update(s)"
    saved = {}
    report = ledger.save_all(lambda item_id, tags: saved.setdefault(item_id, tags) is tags)
    assert report.ok is True
    assert saved == {"1": ("pop",)}
