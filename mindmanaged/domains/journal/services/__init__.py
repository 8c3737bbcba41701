from mindmanaged.domains.journal.services.journal_service import (
    create_entry,
    delete_entry,
    get_entry,
    list_entries,
    update_entry,
)

__all__ = ["create_entry", "get_entry", "update_entry", "delete_entry", "list_entries"]
