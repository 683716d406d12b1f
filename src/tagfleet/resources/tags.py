"""Tag catalog resource wrapper."""

from __future__ import annotations

from typing import Any, Mapping, Optional, cast
from urllib.parse import quote

from .base import Resource
from .tags_types import TagPage, TagQuery, _normalize_tag_page
from ._common_types import ValidationMode, _normalize_domain_type, _normalize_tag_id


def _tag_path(tag_id: str) -> str:
    return f"/tags/{quote(tag_id, safe='')}"


class Tags(Resource):
    """Tag catalog operations."""

    def list_by_type(
        self,
        domain_type: str,
        query: Optional[TagQuery] = None,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
        raise_on_error: Optional[bool] = None,
    ) -> TagPage | None:
        """Fetch one page of tags of a single domain type.

        Parameters
        ----------
        domain_type
            ``CAR``, ``BIKE``, ``PET`` or ``KID`` (any letter case).
        query
            Filter and paging parameters, sent as the query string.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.
        raise_on_error
            Per-call override of the client's ``raise_on_error`` setting.

        Returns
        -------
        TagPage or None
            Normalized ``{"tags", "meta"}`` page, or ``None`` on error.
        """
        if validation == "off":
            type_segment = str(domain_type)
        else:
            try:
                type_segment = _normalize_domain_type(domain_type)
            except ValueError:
                if validation == "strict":
                    raise
                self._logger.warning("Invalid domain_type for list_by_type: %s", domain_type)
                return None

        params = dict(query) if query else None
        response = self._get(
            f"/tags/type/{quote(type_segment, safe='')}",
            params=params,
            timeout=timeout,
            raise_on_error=raise_on_error,
        )
        if response is None:
            return None

        try:
            page, entry_errors = _normalize_tag_page(
                response,
                domain_type=type_segment if validation != "off" else None,  # type: ignore[arg-type]
            )
        except ValueError as exc:
            if validation == "strict":
                raise
            self._logger.warning("Tag listing response was malformed: %s", exc)
            return None

        if entry_errors:
            if validation == "strict":
                raise ValueError(f"Invalid tags in listing: {entry_errors}")
            self._logger.warning("Skipping invalid tags in listing: %s", entry_errors)
        return page

    def update(
        self,
        tag_id: str,
        fields: Mapping[str, Any],
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
        raise_on_error: Optional[bool] = None,
    ) -> dict[str, Any] | None:
        """Patch a tag's nickname, status and profile fields.

        Parameters
        ----------
        tag_id
            Tag identifier.
        fields
            Partial update body; sent unchanged as the JSON payload.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.
        raise_on_error
            Per-call override of the client's ``raise_on_error`` setting.

        Returns
        -------
        dict or None
            Updated tag dict (or the server's success envelope), or ``None``
            on error.
        """
        if validation == "off":
            normalized_id = str(tag_id)
        else:
            normalized_id = _normalize_tag_id(tag_id)
            if normalized_id is None:
                if validation == "strict":
                    raise ValueError(f"Invalid tag_id: {tag_id}")
                self._logger.warning("Invalid tag_id for update: %s", tag_id)
                return None
            if not isinstance(fields, Mapping) or not fields:
                if validation == "strict":
                    raise ValueError(f"Invalid update fields: {fields}")
                self._logger.warning("No updates provided for tag %s", tag_id)
                return None

        response = self._patch(
            _tag_path(normalized_id),
            json=dict(fields),
            timeout=timeout,
            raise_on_error=raise_on_error,
        )
        if not isinstance(response, dict):
            return None

        # Deployments answer with the tag itself, or wrap it in `data`/`tag`.
        for key in ("data", "tag"):
            wrapped = response.get(key)
            if isinstance(wrapped, dict):
                return cast(dict[str, Any], wrapped)
        return response

    def delete(
        self,
        tag_id: str,
        *,
        validation: ValidationMode = "warn",
        timeout: Optional[int] = None,
        raise_on_error: Optional[bool] = None,
    ) -> bool:
        """Delete a tag by ID.

        Parameters
        ----------
        tag_id
            Tag identifier.
        validation
            Validation mode: ``"off"`` sends inputs as-is, ``"warn"`` drops invalid
            inputs with warnings, and ``"strict"`` raises on invalid inputs.
        timeout
            Request timeout in seconds.
        raise_on_error
            Per-call override of the client's ``raise_on_error`` setting.

        Returns
        -------
        bool
            ``True`` when the delete request succeeds.
        """
        if validation == "off":
            normalized_id = str(tag_id)
        else:
            normalized_id = _normalize_tag_id(tag_id)
            if normalized_id is None:
                if validation == "strict":
                    raise ValueError(f"Invalid tag_id: {tag_id}")
                self._logger.warning("Invalid tag_id for delete: %s", tag_id)
                return False

        response = self._delete(_tag_path(normalized_id), timeout=timeout, raise_on_error=raise_on_error)
        return response is not None
