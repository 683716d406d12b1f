"""Stateful tag console engine built on the tagfleet client."""

from .catalog import CatalogResult, TagCatalog
from .editor import EditorState, EditSession, MutationResult, TagEditor
from .filters import PAGE_SIZE, FilterState, build_query
from .schema import ProfileField, build_form_state, fields_for
from .vendors import VendorCache

__all__ = [
    "CatalogResult",
    "EditSession",
    "EditorState",
    "FilterState",
    "MutationResult",
    "PAGE_SIZE",
    "ProfileField",
    "TagCatalog",
    "TagEditor",
    "VendorCache",
    "build_form_state",
    "build_query",
    "fields_for",
]
