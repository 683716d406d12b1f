"""Edit and delete coordination for tags shown by a ``TagCatalog``."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional

from ..errors import TagFleetError, user_message
from ..resources._common_types import _normalize_status, _normalize_tag_id
from ..resources.tags_types import Tag
from ..utils import is_blank
from .catalog import TagCatalog
from .prompts import DELETE_TAG_MESSAGE, confirm_prompt
from .schema import build_form_state, fields_for, missing_required

if TYPE_CHECKING:  # pragma: no cover
    from ..client import TagFleet

UPDATE_FAILED_MESSAGE = "Failed to update tag"
DELETE_FAILED_MESSAGE = "Failed to delete tag"
DELETE_NOT_CONFIRMED_MESSAGE = "Delete was not confirmed"

_logger = logging.getLogger(__name__)


class EditorState(enum.Enum):
    IDLE = "idle"
    EDIT_SESSION_OPEN = "edit_session_open"
    SUBMITTING = "submitting"
    DELETE_CONFIRMING = "delete_confirming"
    DELETING = "deleting"


@dataclass(frozen=True)
class MutationResult:
    ok: bool
    error: Optional[str] = None
    cancelled: bool = False


@dataclass
class EditSession:
    """One tag's editable fields, held locally until submitted."""

    tag: Tag
    form_state: dict[str, Any]


class TagEditor:
    """Coordinates edit sessions and confirmed deletes against a catalog.

    Mutations are confirmed by the server before anything changes locally:
    after a successful update or delete the catalog is re-fetched with the
    filters current at that moment, and after a failure the list is left
    exactly as it was.
    """

    def __init__(
        self,
        client: "TagFleet",
        catalog: TagCatalog,
        *,
        confirm: Callable[[str], bool] = confirm_prompt,
        timeout: Optional[int] = None,
    ) -> None:
        self._client = client
        self.catalog = catalog
        self._confirm = confirm
        self.timeout = timeout
        self._session: Optional[EditSession] = None
        self._submitting = False
        self._pending_delete: Optional[str] = None
        self._deleting = False
        self.error: Optional[str] = None

    @property
    def state(self) -> EditorState:
        if self._deleting:
            return EditorState.DELETING
        if self._pending_delete is not None:
            return EditorState.DELETE_CONFIRMING
        if self._submitting:
            return EditorState.SUBMITTING
        if self._session is not None:
            return EditorState.EDIT_SESSION_OPEN
        return EditorState.IDLE

    @property
    def session(self) -> Optional[EditSession]:
        return self._session

    # ------------------------------------------------------------------
    # Edit sessions
    # ------------------------------------------------------------------
    def open_edit(self, tag: Tag) -> EditSession:
        """Start editing ``tag``; any unsaved session is discarded."""
        if self._submitting:
            raise RuntimeError("Cannot open an edit session while a submit is in flight")
        if tag.domain_type != self.catalog.domain_type:
            raise ValueError(
                f"Tag {tag.id} is a {tag.domain_type} tag; this editor manages {self.catalog.domain_type} tags"
            )
        if self._session is not None:
            _logger.debug("Discarding unsaved edits for tag %s", self._session.tag.id)
        self._session = EditSession(tag=tag, form_state=build_form_state(tag))
        self.error = None
        return self._session

    def set_field(self, name: str, value: Any) -> None:
        if self._session is None:
            raise RuntimeError("No edit session is open")
        if name not in self._session.form_state:
            raise KeyError(f"{name!r} is not editable on {self._session.tag.domain_type} tags")
        if name == "status":
            value = _normalize_status(value)
        self._session.form_state[name] = value

    def cancel_edit(self) -> None:
        self._session = None
        self.error = None

    def submit_edit(
        self,
        tag_id: Optional[str] = None,
        form_state: Optional[Mapping[str, Any]] = None,
    ) -> MutationResult:
        """Send the open session's form state as a partial update.

        Parameters
        ----------
        tag_id
            Tag to update; must match the open session when given.
        form_state
            Replacement form state; must have exactly the session's keys. Its
            ``status`` is normalized like ``set_field`` does.

        Returns
        -------
        MutationResult
            ``ok`` when the server accepted the update. Failures keep the
            session open and set ``error``.
        """
        session = self._session
        if session is None:
            raise RuntimeError("No edit session is open")
        if tag_id is not None and tag_id != session.tag.id:
            raise ValueError(f"Edit session is for tag {session.tag.id}, not {tag_id}")
        if form_state is not None:
            if set(form_state) != set(session.form_state):
                raise ValueError(
                    f"Form fields {sorted(form_state)} do not match {sorted(session.form_state)}"
                )
            replacement = dict(form_state)
            if not is_blank(replacement["status"]):
                replacement["status"] = _normalize_status(replacement["status"])
            session.form_state = replacement

        problems = []
        if is_blank(session.form_state["status"]):
            problems.append("Status is required")
        labels = {f.name: f.label for f in fields_for(session.tag.domain_type)}
        problems.extend(
            f"{labels[name]} is required"
            for name in missing_required(session.tag.domain_type, session.form_state)
        )
        if problems:
            self.error = ", ".join(problems)
            return MutationResult(ok=False, error=self.error)

        self._submitting = True
        try:
            response = self._client.tags.update(
                session.tag.id,
                dict(session.form_state),
                validation="strict",
                timeout=self.timeout,
                raise_on_error=True,
            )
        except TagFleetError as exc:
            self.error = user_message(exc, UPDATE_FAILED_MESSAGE)
            return MutationResult(ok=False, error=self.error)
        finally:
            self._submitting = False

        if response is None:
            self.error = UPDATE_FAILED_MESSAGE
            return MutationResult(ok=False, error=self.error)

        # A newer open_edit may have replaced the session while this submit ran.
        if self._session is session:
            self._session = None
        self.error = None
        self.catalog.refresh_after_change()
        return MutationResult(ok=True)

    # ------------------------------------------------------------------
    # Deletes
    # ------------------------------------------------------------------
    def request_delete(self, tag_id: str) -> MutationResult:
        """Ask for confirmation, then delete ``tag_id`` if the user agrees."""
        normalized_id = _normalize_tag_id(tag_id)
        if normalized_id is None:
            raise ValueError(f"Invalid tag_id: {tag_id}")
        if self._deleting:
            raise RuntimeError("A delete is already in flight")

        self._pending_delete = normalized_id
        confirmed = False
        try:
            confirmed = self._confirm(DELETE_TAG_MESSAGE) is True
        finally:
            if not confirmed:
                self._pending_delete = None
        if not confirmed:
            return MutationResult(ok=False, cancelled=True)
        return self.confirm_delete(normalized_id)

    def cancel_delete(self) -> None:
        self._pending_delete = None

    def confirm_delete(self, tag_id: str) -> MutationResult:
        """Delete a tag the user has just confirmed via ``request_delete``.

        Without that confirmation nothing is sent and the result carries
        ``DELETE_NOT_CONFIRMED_MESSAGE``.
        """
        if self._pending_delete is None or self._pending_delete != tag_id:
            _logger.warning("Refusing to delete tag %s without confirmation", tag_id)
            return MutationResult(ok=False, error=DELETE_NOT_CONFIRMED_MESSAGE)

        self._pending_delete = None
        self._deleting = True
        try:
            self._client.tags.delete(
                tag_id,
                validation="strict",
                timeout=self.timeout,
                raise_on_error=True,
            )
        except TagFleetError as exc:
            self.error = user_message(exc, DELETE_FAILED_MESSAGE)
            return MutationResult(ok=False, error=self.error)
        finally:
            self._deleting = False

        if self._session is not None and self._session.tag.id == tag_id:
            self._session = None
        self.error = None
        self.catalog.refresh_after_change()
        return MutationResult(ok=True)


__all__ = [
    "DELETE_FAILED_MESSAGE",
    "DELETE_NOT_CONFIRMED_MESSAGE",
    "EditSession",
    "EditorState",
    "MutationResult",
    "TagEditor",
    "UPDATE_FAILED_MESSAGE",
]
