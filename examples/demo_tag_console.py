"""CLI demo that drives the :mod:`tagfleet.console` engine.

Run with the virtual environment activated::

    python examples/demo_tag_console.py car

Set ``TAGFLEET_BASE_URL`` if the admin API is not available at the default
(``http://localhost:4000/api``) and ``TAGFLEET_TOKEN`` to send a session token.
"""

import logging
import os
import sys

PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
SRC_DIR = os.path.join(PROJECT_ROOT, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from tagfleet import SessionContext, TagFleet
from tagfleet.console import TagCatalog, TagEditor, VendorCache, fields_for

logging.basicConfig(level=logging.INFO)


def show_page(catalog: TagCatalog, vendors: VendorCache) -> None:
    if catalog.error:
        print(f"Error: {catalog.error}")
        return
    if catalog.is_empty:
        print(f"No {catalog.domain_type.lower()} tags found.")
        return
    summary_field = fields_for(catalog.domain_type)[0].name
    for idx, tag in enumerate(catalog.tags, start=1):
        vendor = vendors.name_for(tag.vendor_id) or "-"
        print(
            f"{idx:>3}. {tag.code:<12} {tag.nickname or '-':<16} {tag.status or '?':<10} "
            f"{tag.profile.get(summary_field, '-')}  [{vendor}]"
        )
    meta = catalog.meta
    if meta:
        print(f"Page {meta.get('page')} of {meta.get('totalPages')} ({meta.get('total')} tags)")


def main() -> None:
    domain_type = sys.argv[1] if len(sys.argv) > 1 else "car"
    session_context = SessionContext()
    token = os.environ.get("TAGFLEET_TOKEN")
    if token:
        session_context.init(token, "admin")

    client = TagFleet(session_context=session_context)
    vendors = VendorCache(client)
    vendors.load_vendors()
    catalog = TagCatalog(client, domain_type)
    editor = TagEditor(client, catalog)

    catalog.refresh()
    show_page(catalog, vendors)

    search = input("\nSearch (press Enter to skip): ").strip()
    if search:
        catalog.set_search(search)
        show_page(catalog, vendors)

    choice = input("\nEdit which tag number? (press Enter to exit): ").strip()
    if not choice.isdigit() or not 1 <= int(choice) <= len(catalog.tags):
        return

    session = editor.open_edit(catalog.tags[int(choice) - 1])
    nickname = input(f"Nickname [{session.form_state['nickname']}]: ").strip()
    if nickname:
        editor.set_field("nickname", nickname)
    for profile_field in fields_for(catalog.domain_type):
        value = input(f"{profile_field.label} [{session.form_state[profile_field.name]}]: ").strip()
        if value:
            editor.set_field(profile_field.name, value)

    result = editor.submit_edit()
    print("Saved." if result.ok else f"Error: {result.error}")
    show_page(catalog, vendors)


if __name__ == "__main__":
    main()
