"""Identifier helpers for primary keys and stored file names."""

import uuid


def uuid7_or_4() -> uuid.UUID:
    """Time-ordered uuid7 where the interpreter has it, else uuid4."""
    return getattr(uuid, "uuid7", uuid.uuid4)()


def media_token() -> str:
    """Hex name for an uploaded file; sorts by upload time under uuid7."""
    return uuid7_or_4().hex
