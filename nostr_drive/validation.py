"""
Kind allow-list for folder members.

Which kinds may live in a folder is product policy, not protocol: the
allow-list is injected into FolderService rather than hard-coded, and folder
nesting can be switched off.
"""

from __future__ import annotations

from collections.abc import Iterable

from .exceptions import InvalidKindError
from .kinds import FOLDER_KIND, MEMBER_KINDS


class KindValidator:
    """Checks member kinds against a fixed allow-list."""

    def __init__(
        self,
        allowed_kinds: Iterable[int] | None = None,
        allow_nesting: bool | None = None,
    ):
        """Initialize the validator.

        Args:
            allowed_kinds: Member kinds to allow. Defaults to MEMBER_KINDS.
            allow_nesting: Allow folders inside folders. True adds the folder
                kind to the list and False removes it. When omitted, nesting
                is on for the default list and an explicit list is taken
                as given.
        """
        if allowed_kinds is None:
            kinds = list(MEMBER_KINDS)
            if allow_nesting is None:
                allow_nesting = True
        else:
            kinds = list(allowed_kinds)

        if allow_nesting:
            kinds.append(FOLDER_KIND)
        elif allow_nesting is False:
            kinds = [kind for kind in kinds if kind != FOLDER_KIND]
        # Keep first occurrence order, drop repeats
        self._allowed: tuple[int, ...] = tuple(dict.fromkeys(kinds))

    def is_allowed(self, kind: int) -> bool:
        return kind in self._allowed

    def validate(self, kind: int) -> None:
        """Raise InvalidKindError if the kind is not allowed."""
        if not self.is_allowed(kind):
            raise InvalidKindError(kind, self._allowed)

    def allowed_kinds(self) -> tuple[int, ...]:
        return self._allowed

    def __repr__(self) -> str:
        return f"KindValidator(allowed_kinds={list(self._allowed)})"
