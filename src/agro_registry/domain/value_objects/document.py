from __future__ import annotations

import re
from enum import Enum

from agro_registry.domain.errors import ValidationError

_NON_DIGITS = re.compile(r"[^0-9]")


class DocumentType(str, Enum):
    """Brazilian tax identifier kinds: CPF for people, CNPJ for companies."""

    CPF = "CPF"
    CNPJ = "CNPJ"


def normalize_document(raw: str) -> str:
    """Strip every non-digit character, e.g. ``123.456.789-01`` -> ``12345678901``."""
    return _NON_DIGITS.sub("", raw)


class Document(str):
    """Value Object for a normalized CPF/CNPJ (digits only)."""

    def __new__(cls, value: str) -> "Document":
        return str.__new__(cls, normalize_document(value))


EMPTY_DOCUMENT_MESSAGE = "document must contain at least one digit"


def require_document(raw: str) -> str:
    """Normalize ``raw`` and reject it when no digits are left."""
    document = normalize_document(raw)
    if not document:
        raise ValidationError("document", EMPTY_DOCUMENT_MESSAGE)
    return document
