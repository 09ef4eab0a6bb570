"""Name-based UI hint conventions.

Keys are hidden, email fields get the email template. The Id check
runs first, so ``"EmailId"`` is hidden.
"""

from __future__ import annotations

from displaykit.domain.types import UiHint

KEY_SUFFIX = "id"
EMAIL_MARKER = "email"


def hint_for_name(name: str) -> UiHint | None:
    """Return the UI hint implied by a property name, if any."""
    folded = name.casefold()
    if folded.endswith(KEY_SUFFIX):
        return UiHint.HIDDEN
    if EMAIL_MARKER in folded:
        return UiHint.EMAIL
    return None
