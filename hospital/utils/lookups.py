"""Resolving path and body references to rows."""
from hospital.extensions import db

# Largest value a signed 64-bit INTEGER primary key can hold
MAX_PRIMARY_KEY = 2 ** 63 - 1


def parse_primary_key(ref):
    """Returns ``ref`` as an integer primary key the database can store, or None."""
    if isinstance(ref, bool):
        return None
    if isinstance(ref, str):
        ref = ref.strip()
        if not (ref.isascii() and ref.isdecimal()) or len(ref) > len(str(MAX_PRIMARY_KEY)):
            return None
        ref = int(ref)
    if not isinstance(ref, int) or not 1 <= ref <= MAX_PRIMARY_KEY:
        return None
    return ref


def find_by_ref(model, ref, code_column=None):
    """
    Looks a row up by native id, or by its generated identifier
    (``PAT000001``, case-insensitive) when ``code_column`` is given.

    Anything that is neither resolves to None, so callers only need to
    handle the not-found case.
    """
    if isinstance(ref, bool):
        return None
    if isinstance(ref, (int, str)):
        key = parse_primary_key(ref)
        if key is not None:
            return db.session.get(model, key)
    if isinstance(ref, str) and code_column is not None and ref.strip():
        return model.query.filter(code_column == ref.strip().upper()).first()
    return None
