from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Dict,
    Iterable,
    List,
    Optional,
    Tuple,
)

from mixtape import logger as logger_mod
from mixtape.errors import NoOpenSessionError

from .catalog import CatalogAction, CatalogChange, TagCatalog
from .models import (
    AddTag,
    ApplyEdit,
    CancelEdit,
    EditCommand,
    EditOutcome,
    EditSession,
    Item,
    RemoveTag,
    RenderModel,
    StartEdit,
)
from .pool import available_pool

if TYPE_CHECKING:
    from mixtape.store.base import ItemStore

log = logger_mod.get_logger()

PersistenceCommit = Callable[[Item, Tuple[str, ...]], Any]
RenderSink = Callable[[RenderModel], None]

# (changed, committed_tags)
_StepResult = Tuple[bool, Optional[Tuple[str, ...]]]


class StagingController:
    """Per-item tag edit sessions with local staging.

    Contract:
    - at most one open EditSession per item; start_edit on an open item is a no-op
    - add() and removing a tag added in the same session stay local
    - removing a tag the item had when the session opened commits immediately
    - apply() commits the working copy and closes the session
    - cancel() restores the snapshot locally and closes the session; it does not
      undo commits already made by remove()

    Every command updates the session, emits a RenderModel for the item and then,
    if it commits, calls `on_tags_changed(item, tags)`. The callback's return value
    is not inspected and local state is never rolled back on its account.
    """

    def __init__(
        self,
        catalog: TagCatalog,
        store: ItemStore,
        on_tags_changed: PersistenceCommit,
        render_sink: Optional[RenderSink] = None,
    ):
        self.catalog = catalog
        self.store = store
        self._on_tags_changed = on_tags_changed
        self._render_sink = render_sink
        self._sessions: Dict[str, EditSession] = {}
        self._visible: Optional[set] = None
        self._handlers: Dict[type, Callable[[Any], _StepResult]] = {
            StartEdit: self._start_edit,
            AddTag: self._add,
            RemoveTag: self._remove,
            ApplyEdit: self._apply,
            CancelEdit: self._cancel,
        }
        self._unsubscribers = [
            catalog.subscribe(self._on_catalog_changed),
            store.on_removed(self.item_removed),
        ]

    # --- Public intents -----------------------------------------------------

    def start_edit(self, item_id: str) -> EditOutcome:
        return self.apply_edit(StartEdit(item_id))

    def add(self, item_id: str, tag: str) -> EditOutcome:
        return self.apply_edit(AddTag(item_id, tag))

    def remove(self, item_id: str, tag: str) -> EditOutcome:
        return self.apply_edit(RemoveTag(item_id, tag))

    def apply(self, item_id: str) -> EditOutcome:
        return self.apply_edit(ApplyEdit(item_id))

    def cancel(self, item_id: str) -> EditOutcome:
        return self.apply_edit(CancelEdit(item_id))

    def apply_edit(self, command: EditCommand) -> EditOutcome:
        handler = self._handlers.get(type(command))
        if handler is None:
            raise TypeError(f"Unsupported edit command: {command!r}")

        log.debug(f"[EDIT] {command!r}")
        changed, committed_tags = handler(command)

        render = self.view_model(command.item_id)
        try:
            self._emit(render)
        finally:
            # The store already holds committed_tags; persistence must follow.
            if committed_tags is not None:
                item = self.store.get(command.item_id)
                log.info(f"[COMMIT] {item.id!r} -> {list(committed_tags)}")
                self._on_tags_changed(item, committed_tags)

        return EditOutcome(
            command=command,
            changed=changed,
            render=render,
            committed_tags=committed_tags,
        )

    # --- Queries ------------------------------------------------------------

    def session(self, item_id: str) -> Optional[EditSession]:
        return self._sessions.get(item_id)

    def has_open_session(self, item_id: str) -> bool:
        return item_id in self._sessions

    def open_sessions(self) -> List[EditSession]:
        return list(self._sessions.values())

    def view_model(self, item_id: str) -> RenderModel:
        """Render state for an item, from its session if one is open."""
        session = self._sessions.get(item_id)
        if session is not None:
            assigned: Iterable[str] = session.current_tags
        else:
            assigned = self.store.get(item_id).tags
        assigned = tuple(assigned)
        return RenderModel(
            item_id=item_id,
            assigned_tags=assigned,
            available_tags=tuple(available_pool(self.catalog, assigned)),
            session_open=session is not None,
        )

    def set_visible_items(self, item_ids: Optional[Iterable[str]]) -> None:
        """Limit render emission to these items. None means every item."""
        self._visible = None if item_ids is None else set(item_ids)

    # --- External lifecycle -------------------------------------------------

    def item_removed(self, item_id: str) -> None:
        """Drop the item's session without committing or rendering."""
        session = self._sessions.pop(item_id, None)
        if session is None:
            return
        session.close()
        log.debug(f"[EDIT] discarded session for removed item {item_id!r}")

    def close(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []

    # --- Command handlers ---------------------------------------------------

    def _require_session(self, item_id: str) -> EditSession:
        session = self._sessions.get(item_id)
        if session is None:
            raise NoOpenSessionError(f"No open edit session for item {item_id!r}")
        return session

    def _start_edit(self, command: StartEdit) -> _StepResult:
        if command.item_id in self._sessions:
            log.debug(f"[EDIT] session already open for {command.item_id!r}")
            return False, None
        item = self.store.get(command.item_id)
        self._sessions[item.id] = EditSession(item.id, item.tags)
        return True, None

    def _add(self, command: AddTag) -> _StepResult:
        session = self._require_session(command.item_id)
        if command.tag not in self.catalog:
            log.debug(f"[EDIT] ignoring add of unknown tag {command.tag!r}")
            return False, None
        if not session.add(command.tag):
            log.debug(f"[EDIT] {command.tag!r} already assigned")
            return False, None
        return True, None

    def _remove(self, command: RemoveTag) -> _StepResult:
        session = self._require_session(command.item_id)
        if not session.remove(command.tag):
            log.debug(f"[EDIT] ignoring removal of unassigned tag {command.tag!r}")
            return False, None
        if not session.is_original(command.tag):
            return True, None
        return True, self._write_back(session.item_id, session.current_tags)

    def _apply(self, command: ApplyEdit) -> _StepResult:
        session = self._require_session(command.item_id)
        committed = self._write_back(session.item_id, session.current_tags)
        self._close_session(session)
        return True, committed

    def _cancel(self, command: CancelEdit) -> _StepResult:
        session = self._require_session(command.item_id)
        session.reset()
        self.store.set_tags(session.item_id, session.original_tags)
        self._close_session(session)
        return True, None

    def _write_back(self, item_id: str, tags: Iterable[str]) -> Tuple[str, ...]:
        snapshot = tuple(tags)
        self.store.set_tags(item_id, snapshot)
        return snapshot

    def _close_session(self, session: EditSession) -> None:
        session.close()
        self._sessions.pop(session.item_id, None)

    # --- Notifications ------------------------------------------------------

    def _on_catalog_changed(self, change: CatalogChange) -> None:
        if change.action == CatalogAction.RENAMED:
            # Assigned tags keep the old name until the user removes them.
            log.debug(f"[CATALOG] {change.tag!r} renamed to {change.new_tag!r}")
        for session in list(self._sessions.values()):
            self._emit(self.view_model(session.item_id))

    def _emit(self, render: RenderModel) -> None:
        if self._render_sink is None:
            return
        if self._visible is not None and render.item_id not in self._visible:
            return
        self._render_sink(render)
