"""Generic fetch / filter / render / mutate view.

``ListManagementView`` holds everything one admin list screen needs: the
displayed collection, the active filters, the selected record with the
surface it drives (edit form or delete confirmation), the detail surface and
a transient notice. It talks to the church API through a ``RecordSource`` and
never lets a failure escape; failures become notices, and an expired session
raises the ``login_required`` flag instead.
"""
from __future__ import annotations

import logging
import threading
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, Protocol, Sequence, TypeVar

from ..core.constants import DEFAULT_DEBOUNCE_MS, GENERIC_ERROR_MESSAGE
from ..core.enums import NoticeLevel, ViewMode
from ..core.exceptions import ConsoleError, SessionExpiredError, ValidationError
from .debounce import Debouncer, Scheduler
from .filters import FilterCriteria

logger = logging.getLogger(__name__)


class Record(Protocol):
    id: str

    def to_api(self) -> Dict[str, Any]: ...


R = TypeVar("R", bound=Record)


@dataclass(frozen=True)
class ListResult(Generic[R]):
    items: Sequence[R]
    extras: Dict[str, Any] = field(default_factory=dict)


class RecordSource(Protocol[R]):
    """What a list screen needs from a feature service."""

    def list_records(self, params: Mapping[str, str]) -> ListResult[R]: ...

    def get_record(self, record_id: str) -> R: ...

    def update_record(self, record_id: str, changes: Dict[str, Any]) -> None: ...

    def delete_record(self, record_id: str) -> None: ...


@dataclass(frozen=True)
class Notice:
    level: NoticeLevel
    text: str


class Surface(str, Enum):
    """Which modal the selected record is driving."""

    NONE = "none"
    EDIT = "edit"
    DELETE = "delete"


@dataclass
class DetailSurface(Generic[R]):
    record_id: str
    record: Optional[R] = None
    error: Optional[str] = None


def changed_fields(current: Mapping[str, Any], patch: Mapping[str, Any]) -> Dict[str, Any]:
    """Fields of ``patch`` worth sending: non-empty and different from ``current``."""
    changes: Dict[str, Any] = {}
    for name, value in patch.items():
        if value is None or value == "":
            continue
        if name in current and current[name] == value:
            continue
        changes[name] = value
    return changes


class ListManagementView(Generic[R]):
    def __init__(
        self,
        source: RecordSource[R],
        *,
        filter_fields: Iterable[str],
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        scheduler: Optional[Scheduler] = None,
        on_auth_expired: Optional[Callable[[], None]] = None,
        on_change: Optional[Callable[[], None]] = None,
        auto_reload: bool = True,
        record_label: str = "Record",
    ):
        self._source = source
        self._filters = FilterCriteria(filter_fields)
        self._debouncer = Debouncer(debounce_ms, self.load, scheduler=scheduler)
        self._on_auth_expired = on_auth_expired
        self._on_change = on_change
        self._auto_reload = auto_reload
        self._record_label = record_label

        self._lock = threading.RLock()
        self._generation = 0

        self.items: List[R] = []
        self.extras: Dict[str, Any] = {}
        self.loading = False
        self.loaded = False
        self.view_mode = ViewMode.TABLE
        self.notice: Optional[Notice] = None
        self.login_required = False
        self.selected: Optional[R] = None
        self.surface = Surface.NONE
        self.detail: Optional[DetailSurface[R]] = None

    # ------------------------------------------------------------------
    # Filters and loading
    # ------------------------------------------------------------------

    @property
    def filters(self) -> FilterCriteria:
        return self._filters.copy()

    @property
    def reload_pending(self) -> bool:
        return self._debouncer.pending

    def load(self, filters: Optional[Mapping[str, str]] = None) -> bool:
        """Fetch the collection for ``filters`` (or the active criteria).

        Returns True when the displayed collection was replaced.
        """
        with self._lock:
            if filters is not None:
                try:
                    self._filters = FilterCriteria(self._filters.fields, filters)
                except ValidationError as exc:
                    self._handle_failure(exc, action="load")
                    return False
            self._generation += 1
            generation = self._generation
            params = self._filters.to_query_params()
            self.loading = True

        try:
            result = self._source.list_records(params)
        except Exception as exc:
            with self._lock:
                if generation != self._generation:
                    logger.debug("Dropping failure of superseded load %s", generation)
                    return False
                self.loading = False
                self._handle_failure(exc, action="load")
            self._changed()
            return False

        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping response of superseded load %s", generation)
                return False
            self.items = list(result.items)
            self.extras = dict(result.extras)
            self.loading = False
            self.loaded = True
        self._changed()
        return True

    def apply_filter_change(self, field_name: str, value: str) -> None:
        with self._lock:
            try:
                self._filters.set(field_name, value)
            except ValidationError as exc:
                self._handle_failure(exc, action="filter")
                return
        self._debouncer.trigger()

    def clear_filters(self) -> None:
        with self._lock:
            self._filters.clear()
        self._debouncer.trigger()

    def flush_pending_reload(self) -> None:
        self._debouncer.flush()

    def set_view_mode(self, mode: ViewMode) -> None:
        self.view_mode = ViewMode(mode)
        self._changed()

    # ------------------------------------------------------------------
    # Edit
    # ------------------------------------------------------------------

    def begin_edit(self, record: R) -> None:
        with self._lock:
            self.selected = record
            self.surface = Surface.EDIT
        self._changed()

    def edit(self, record: R, patch: Mapping[str, Any]) -> bool:
        changes = changed_fields(record.to_api(), patch)
        if not changes:
            self.close_surface()
            self.notice = Notice(NoticeLevel.INFO, "No changes to save.")
            return True

        with self._lock:
            self.selected = record
            self.surface = Surface.EDIT

        try:
            self._source.update_record(record.id, changes)
        except Exception as exc:
            with self._lock:
                self._handle_failure(exc, action="update")
            self._changed()
            return False

        logger.info("Updated %s %s (%s)", self._record_label.lower(), record.id, ", ".join(sorted(changes)))
        self.close_surface()
        self.notice = Notice(NoticeLevel.SUCCESS, f"{self._record_label} updated successfully.")
        if self._auto_reload:
            self.load()
        return True

    # ------------------------------------------------------------------
    # Delete (two steps: request, then confirm)
    # ------------------------------------------------------------------

    def request_delete(self, record: R) -> None:
        with self._lock:
            self.selected = record
            self.surface = Surface.DELETE
        self._changed()

    def confirm_delete(self) -> bool:
        with self._lock:
            record = self.selected
            confirmed = self.surface == Surface.DELETE
        if record is None or not confirmed:
            self.notice = Notice(NoticeLevel.WARNING, f"Select a {self._record_label.lower()} to delete first.")
            return False

        try:
            self._source.delete_record(record.id)
        except Exception as exc:
            with self._lock:
                self._handle_failure(exc, action="delete")
            self._changed()
            return False

        logger.info("Deleted %s %s", self._record_label.lower(), record.id)
        self.close_surface()
        self.notice = Notice(NoticeLevel.SUCCESS, f"{self._record_label} deleted successfully.")
        if self._auto_reload:
            self.load()
        return True

    def close_surface(self) -> None:
        with self._lock:
            self.selected = None
            self.surface = Surface.NONE
        self._changed()

    # ------------------------------------------------------------------
    # Details
    # ------------------------------------------------------------------

    def view_details(self, record_id: str) -> DetailSurface[R]:
        detail: DetailSurface[R] = DetailSurface(record_id=record_id)
        self.detail = detail
        try:
            detail.record = self._source.get_record(record_id)
        except SessionExpiredError as exc:
            self._handle_failure(exc, action="load details")
        except ConsoleError as exc:
            logger.warning("Could not load details for %s: %s", record_id, exc)
            detail.error = str(exc)
        except Exception:
            logger.exception("Unexpected error loading details for %s", record_id)
            detail.error = GENERIC_ERROR_MESSAGE
        self._changed()
        return detail

    def close_details(self) -> None:
        self.detail = None
        self._changed()

    def dismiss_notice(self) -> None:
        self.notice = None

    # ------------------------------------------------------------------

    def _handle_failure(self, exc: Exception, *, action: str) -> None:
        if isinstance(exc, SessionExpiredError):
            logger.info("Session expired during %s; login required", action)
            self.login_required = True
            self.notice = Notice(NoticeLevel.WARNING, str(exc))
            self._debouncer.cancel()
            if self._on_auth_expired is not None:
                self._on_auth_expired()
        elif isinstance(exc, ConsoleError):
            logger.warning("Failed to %s %s: %s", action, self._record_label.lower(), exc)
            self.notice = Notice(NoticeLevel.DANGER, str(exc))
        else:
            logger.exception("Unexpected error during %s", action)
            self.notice = Notice(NoticeLevel.DANGER, GENERIC_ERROR_MESSAGE)

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()
