"""Language Strings — centralized locale-specific text for API responses.

Invariants:
    - All strings are pure data (no IO, no computation beyond formatting)
    - Every message key covers every Locale member
    - Unknown locale values fall back to English

Design Decisions:
    - Message keys over inline strings: errors carry a key + params and are
      rendered at response time, so services stay locale-agnostic
    - Resource labels translated separately: one template per message, not per resource
"""

from filmoteca.core.domain_types import Locale, ResourceType


# --- Resource labels ----------------------------------------------------------

_RESOURCE_LABELS: dict[Locale, dict[ResourceType, str]] = {
    Locale.EN: {
        ResourceType.MOVIE: "Movie",
        ResourceType.GENRE: "Genre",
        ResourceType.LANGUAGE: "Language",
    },
    Locale.PT_BR: {
        ResourceType.MOVIE: "Filme",
        ResourceType.GENRE: "Genero",
        ResourceType.LANGUAGE: "Idioma",
    },
}


# --- Message templates --------------------------------------------------------

_MESSAGES: dict[Locale, dict[str, str]] = {
    Locale.EN: {
        "resource_not_found": "{resource} '{resource_id}' not found",
        "duplicate_resource": "{resource} with {field} '{value}' already exists",
        "required_field": "Field '{field}' is required",
        "validation_error": "Invalid request data",
        "internal_error": "Internal server error",
        "genre_deleted": "Genre removed successfully",
    },
    Locale.PT_BR: {
        "resource_not_found": "{resource} '{resource_id}' nao encontrado",
        "duplicate_resource": "{resource} com {field} '{value}' ja existe",
        "required_field": "O campo '{field}' e obrigatorio",
        "validation_error": "Dados da requisicao invalidos",
        "internal_error": "Erro interno do servidor",
        "genre_deleted": "Genero removido com sucesso",
    },
}


def match_locale(value: str | Locale | None) -> Locale | None:
    """Locale whose value equals value ignoring case, or None."""
    if isinstance(value, Locale):
        return value
    for locale in Locale:
        if value and locale.value.lower() == value.lower():
            return locale
    return None


def resolve_locale(value: str | Locale | None) -> Locale:
    """Map a setting/header value to a Locale, falling back to English."""
    return match_locale(value) or Locale.EN


def resource_label(locale: Locale, resource: ResourceType) -> str:
    """Translated display name for a resource type."""
    return _RESOURCE_LABELS[locale][resource]


def render(locale: str | Locale | None, key: str, **params: object) -> str:
    """Format the message for key in locale.

    ResourceType params are replaced by their translated label before
    formatting, so callers pass the enum and never a pre-translated string.
    """
    loc = resolve_locale(locale)
    template = _MESSAGES[loc].get(key) or _MESSAGES[Locale.EN][key]
    formatted = {
        name: resource_label(loc, val) if isinstance(val, ResourceType) else val
        for name, val in params.items()
    }
    return template.format(**formatted)
