"""Status Messages — user-facing text for every StoreStatus, per locale.

Invariants:
    - Every StoreStatus has a message in every supported Locale
    - Pure data + formatting, no IO
    - Unknown locales fall back to English

Design Decisions:
    - Callers map statuses to text here instead of matching on enum values in
      presentation code (ADR: one place to translate)
"""

from typing import Hashable

from recordstore.core.domain_types import Locale, StoreStatus


_STATUS_MESSAGES: dict[Locale, dict[StoreStatus, str]] = {
    Locale.EN: {
        StoreStatus.NO_ERROR: "Done.",
        StoreStatus.RECORD_EXISTS: "A record with id {record_id} already exists.",
        StoreStatus.RECORD_NOT_FOUND: "No record with id {record_id} was found.",
        StoreStatus.READ_ONLY: (
            "Record {record_id} is inactive. It can be reactivated but not edited."
        ),
        StoreStatus.NO_DELETE: "Record {record_id} cannot be deleted: it does not exist.",
    },
    Locale.PT_BR: {
        StoreStatus.NO_ERROR: "Concluido.",
        StoreStatus.RECORD_EXISTS: "Ja existe um registro com id {record_id}.",
        StoreStatus.RECORD_NOT_FOUND: "Nenhum registro com id {record_id} foi encontrado.",
        StoreStatus.READ_ONLY: (
            "O registro {record_id} esta inativo. Ele pode ser reativado, mas nao editado."
        ),
        StoreStatus.NO_DELETE: (
            "O registro {record_id} nao pode ser excluido: ele nao existe."
        ),
    },
}

_UNKNOWN_ID: dict[Locale, str] = {
    Locale.EN: "(unknown)",
    Locale.PT_BR: "(desconhecido)",
}


def format_status(
    status: StoreStatus,
    locale: Locale | str = Locale.EN,
    record_id: Hashable | None = None,
) -> str:
    """Render `status` for display in the given locale."""
    try:
        loc = Locale(locale)
    except ValueError:
        loc = Locale.EN
    template = _STATUS_MESSAGES[loc][StoreStatus(status)]
    shown = _UNKNOWN_ID[loc] if record_id is None else record_id
    return template.format(record_id=shown)
