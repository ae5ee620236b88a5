from .errors import InvalidReferenceError

ID_PREFIX = "id:"


def is_explicit_ref(ref: str) -> bool:
    """True for ``id:<value>`` references. The prefix check is case-sensitive."""
    return ref.startswith(ID_PREFIX)


def extract_id(ref: str) -> str:
    return ref[len(ID_PREFIX):]


def require_explicit_ref(ref: str, entity_label: str) -> str:
    """Return the id of an explicit reference or refuse a free-text one.

    Used by destructive commands, which never act on a fuzzy name. An empty id
    (``id:``) passes; the backend lookup reports it missing.
    """
    if not is_explicit_ref(ref):
        raise InvalidReferenceError(
            "INVALID_REF",
            f'Invalid {entity_label} reference "{ref}".',
            [f"Use id:xxx format (e.g., id:{ref})"],
        )
    return extract_id(ref)


__all__ = ["ID_PREFIX", "is_explicit_ref", "extract_id", "require_explicit_ref"]
