"""
ErrorTranslator — maps store failure text to a DomainError.

Rules, first match wins:
  1. text starts with NOSCRIPT                → SCRIPT_NOT_LOADED
  2. "UniqueIndexViolation: <field>" anywhere  → UNIQUE_CONSTRAINT(field)
  3. anything else                             → UNKNOWN(text)

Error replies are the store's only error channel, so matching on text is
unavoidable; the patterns are constructor arguments so they can be replaced
if the protocol grows structured codes.
"""

from __future__ import annotations

import re
from typing import Optional

from .models import DomainError, ErrorKind

__all__ = ["ErrorTranslator", "NOSCRIPT_PATTERN", "DUPLICATE_PATTERN"]

NOSCRIPT_PATTERN  = re.compile(r"^NOSCRIPT")
DUPLICATE_PATTERN = re.compile(r"UniqueIndexViolation: (\w+)")


class ErrorTranslator:
    """
    Parameters
    ----------
    noscript  : pattern matched (re.match) against the start of the text
    duplicate : pattern searched anywhere; group 1 is the field name
    """

    def __init__(
        self,
        noscript: Optional[re.Pattern[str]] = None,
        duplicate: Optional[re.Pattern[str]] = None,
    ) -> None:
        self._noscript = noscript or NOSCRIPT_PATTERN
        self._duplicate = duplicate or DUPLICATE_PATTERN

    def classify(self, text: str) -> DomainError:
        if self._noscript.match(text):
            return DomainError(ErrorKind.SCRIPT_NOT_LOADED, text)
        m = self._duplicate.search(text)
        if m:
            return DomainError(ErrorKind.UNIQUE_CONSTRAINT, text, field=m.group(1))
        return DomainError(ErrorKind.UNKNOWN, text)
