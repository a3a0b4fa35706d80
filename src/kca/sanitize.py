"""Free-text input sanitization for request schemas."""

from __future__ import annotations

import re
from typing import Annotated

from pydantic import AfterValidator

_SCRIPT_BLOCK = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)


def sanitize_text(value: str) -> str:
    """Drop ``<script>`` blocks, then escape any remaining angle brackets."""
    value = _SCRIPT_BLOCK.sub("", value)
    return value.replace("<", "&lt;").replace(">", "&gt;")


# Use for user-supplied prose (names, titles, descriptions). Never for source code.
SafeText = Annotated[str, AfterValidator(sanitize_text)]
