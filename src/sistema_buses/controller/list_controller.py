"""Generic list + search + create/edit/delete state for one resource."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping, Sequence
from enum import Enum
from typing import Any, Generic, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from sistema_buses.client.errors import NetworkError
from sistema_buses.schemas.generic import RecordId

from .errors import (
    AlreadyOpen,
    ControllerError,
    DeleteFailed,
    LoadFailed,
    ModalNotOpen,
    NotFound,
    SubmitFailed,
)
from .search import Matcher, field_value, filter_records, substring_matcher

logger = logging.getLogger(__name__)

R = TypeVar("R")

FormValues = dict[str, Any]


class ResourceOperations(Protocol[R]):
    """Network operations a controller drives. ``ResourceClient`` fits."""

    async def fetch_all(self) -> Sequence[R]: ...

    async def create(self, data: Mapping[str, Any]) -> R: ...

    async def update(self, item_id: RecordId, data: Mapping[str, Any]) -> R: ...

    async def remove(self, item_id: RecordId) -> None: ...


class ModalMode(Enum):
    CREATE = "create"
    EDIT = "edit"


@dataclasses.dataclass
class ModalSession:
    """The open create-or-edit form.

    ``record_id`` is set only in EDIT mode. ``error`` holds the message of
    the last failed submit.
    """

    mode: ModalMode
    form_values: FormValues
    record_id: RecordId | None = None
    error: str | None = None
    submitting: bool = False

    @property
    def is_edit(self) -> bool:
        return self.mode is ModalMode.EDIT


def default_id_of(record: Any) -> RecordId:
    return field_value(record, "id")


def record_fields(record: Any, id_field: str = "id") -> FormValues:
    """Current field values of ``record`` (wire names), without its id."""
    if isinstance(record, BaseModel):
        return record.model_dump(by_alias=True, exclude={id_field})
    if isinstance(record, Mapping):
        return {k: v for k, v in record.items() if k != id_field}
    return {k: v for k, v in vars(record).items() if k != id_field}


class ResourceListController(Generic[R]):
    """Drive the load -> filter -> edit -> persist -> reload cycle.

    Args:
        operations: fetch_all/create/update/remove of the resource.
        search_fields: Fields searched by the default matcher.
        matches: Custom ``(record, query) -> bool`` predicate.
        id_of: Identity extraction. Defaults to the ``id`` field.
        default_form: Factory for the create form's initial values.
        form_from_record: Projection of a record into edit form values.
        resource_name: Singular name used in messages and logs.
        label: Plural name used in messages ("Error al cargar <label>").

    Loads are numbered; a completion older than the one already applied
    is discarded, so the list always reflects the newest finished load.
    Only one create/edit session can be open; opening a second one raises
    ``AlreadyOpen``. Nothing is retried automatically.
    """

    def __init__(
        self,
        operations: ResourceOperations[R],
        *,
        search_fields: Sequence[str] = (),
        matches: Matcher | None = None,
        id_of: Callable[[R], RecordId] = default_id_of,
        default_form: Callable[[], Mapping[str, Any]] | None = None,
        form_from_record: Callable[[R], Mapping[str, Any]] = record_fields,
        resource_name: str = "Registro",
        label: str = "registros",
    ) -> None:
        self._ops = operations
        self._matches = matches if matches is not None else substring_matcher(*search_fields)
        self._id_of = id_of
        self._default_form = default_form
        self._form_from_record = form_from_record
        self.resource_name = resource_name
        self.label = label

        self._records: list[R] = []
        self._filtered: list[R] = []
        self._query = ""
        self._modal: ModalSession | None = None
        self._load_seq = 0
        self._applied_seq = 0
        self._pending_loads = 0
        self.error: ControllerError | None = None

    # --- read-only state ---

    @property
    def records(self) -> list[R]:
        return list(self._records)

    @property
    def filtered(self) -> list[R]:
        return list(self._filtered)

    @property
    def query(self) -> str:
        return self._query

    @property
    def modal(self) -> ModalSession | None:
        return self._modal

    @property
    def is_modal_open(self) -> bool:
        return self._modal is not None

    @property
    def loading(self) -> bool:
        return self._pending_loads > 0

    def find(self, record_id: RecordId) -> R | None:
        # Ids from form inputs arrive as text, so compare on str
        wanted = str(record_id)
        for record in self._records:
            if str(self._id_of(record)) == wanted:
                return record
        return None

    def _refilter(self) -> None:
        self._filtered = filter_records(self._records, self._query, self._matches)

    # --- list ---

    async def load(self) -> list[R]:
        """Replace the list with a fresh ``fetch_all`` result.

        Raises:
            LoadFailed: The fetch failed; the previous list is kept.
        """
        self._load_seq += 1
        seq = self._load_seq
        self._pending_loads += 1
        try:
            records = await self._ops.fetch_all()
        except (NetworkError, ValidationError) as exc:
            error = LoadFailed.from_exception(exc, f"Error al cargar {self.label}")
            if seq >= self._applied_seq:
                self.error = error
            logger.warning("Loading %s failed: %s", self.label, error.message)
            raise error from exc
        finally:
            self._pending_loads -= 1

        if seq < self._applied_seq:
            logger.debug(
                "Discarding stale load #%d of %s (already applied #%d)",
                seq, self.label, self._applied_seq,
            )
            return self.records

        self._applied_seq = seq
        self._records = list(records)
        self.error = None
        self._refilter()
        return self.records

    def set_query(self, text: str) -> list[R]:
        self._query = text or ""
        self._refilter()
        return self.filtered

    # --- modal ---

    def _ensure_closed(self) -> None:
        if self._modal is not None:
            raise AlreadyOpen(f"Ya hay un formulario de {self.resource_name} abierto")

    def open_create(self, defaults: Mapping[str, Any] | None = None) -> ModalSession:
        self._ensure_closed()
        if defaults is None:
            defaults = self._default_form() if self._default_form is not None else {}
        self._modal = ModalSession(mode=ModalMode.CREATE, form_values=dict(defaults))
        return self._modal

    def open_edit(self, record_id: RecordId) -> ModalSession:
        """Open the edit form pre-filled with the record's current values.

        Raises:
            AlreadyOpen: Another session is open.
            NotFound: No loaded record has this id.
        """
        self._ensure_closed()
        record = self.find(record_id)
        if record is None:
            raise NotFound(record_id, self.resource_name)
        self._modal = ModalSession(
            mode=ModalMode.EDIT,
            form_values=dict(self._form_from_record(record)),
            record_id=self._id_of(record),
        )
        return self._modal

    def close_modal(self) -> None:
        self._modal = None

    async def submit(self, form_values: Mapping[str, Any] | None = None) -> R:
        """Create or update from the form, then close it and reload.

        ``form_values`` defaults to the session's current values. On
        failure the session stays open with the submitted values and its
        ``error`` set.

        Raises:
            ModalNotOpen: No session is open.
            SubmitFailed: The backend (or the write schema) rejected it, or
                a save of this session is still in flight.
        """
        session = self._modal
        if session is None:
            raise ModalNotOpen("No hay un formulario abierto")
        if session.submitting:
            raise SubmitFailed("El formulario ya se está guardando")

        values = dict(form_values) if form_values is not None else dict(session.form_values)
        session.form_values = values
        session.error = None
        session.submitting = True
        try:
            if session.is_edit:
                saved = await self._ops.update(session.record_id, dict(values))
            else:
                saved = await self._ops.create(dict(values))
        except (NetworkError, ValidationError) as exc:
            error = SubmitFailed.from_exception(exc, "Error al guardar")
            session.error = error.message
            self.error = error
            logger.warning("Saving %s failed: %s", self.resource_name, error.message)
            raise error from exc
        finally:
            session.submitting = False

        # The user may have closed (and reopened) the form while saving
        if self._modal is session:
            self._modal = None
        await self._reload_after_write()
        return saved

    # --- delete ---

    async def delete_record(self, record_id: RecordId) -> None:
        """Remove a record and reload. Confirmation is the caller's job.

        Raises:
            DeleteFailed: The backend refused; the list is left as is.
        """
        try:
            await self._ops.remove(record_id)
        except NetworkError as exc:
            error = DeleteFailed.from_exception(exc, "Error al eliminar")
            self.error = error
            logger.warning("Deleting %s %s failed: %s", self.resource_name, record_id, error.message)
            raise error from exc
        await self._reload_after_write()

    async def _reload_after_write(self) -> None:
        # The write itself succeeded; a failed refresh stays on self.error
        try:
            await self.load()
        except LoadFailed:
            logger.warning("%s saved but the list could not be reloaded", self.resource_name)
