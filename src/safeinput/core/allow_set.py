"""Validated allow-set for the filtered character accessor.

The set is checked once, when it is built, so that a missing or empty
set surfaces as a configuration error at the call site rather than
deep inside an input loop.
"""

from __future__ import annotations

from dataclasses import dataclass

from safeinput.exceptions import AllowSetError


@dataclass(frozen=True, slots=True)
class AllowSet:
    """An immutable, non-empty set of permitted byte values."""

    members: frozenset[int]
    display: str
    """The set as it is shown in diagnostics, in the order it was given."""

    @classmethod
    def parse(cls, allowed: str | bytes | AllowSet | None) -> AllowSet:
        """Build an :class:`AllowSet` from characters or bytes.

        Raises
        ------
        AllowSetError
            If *allowed* is ``None``, empty, or holds a character that
            does not fit in a single byte.
        """
        if isinstance(allowed, AllowSet):
            return allowed
        if allowed is None:
            raise AllowSetError(
                "No allow-set passed to the filtered character accessor.",
            )
        if isinstance(allowed, str):
            try:
                encoded = allowed.encode("latin-1")
            except UnicodeEncodeError as exc:
                raise AllowSetError(
                    f"Allow-set {allowed!r} contains multi-byte characters.",
                    hint="Allowed characters must each fit in a single byte.",
                ) from exc
        else:
            encoded = bytes(allowed)

        if not encoded:
            raise AllowSetError(
                "No allowed characters specified.",
                hint="Pass at least one character, e.g. 'yn'.",
            )

        return cls(members=frozenset(encoded), display=encoded.decode("latin-1"))

    def __contains__(self, byte: object) -> bool:
        return byte in self.members

    def __len__(self) -> int:
        return len(self.members)
