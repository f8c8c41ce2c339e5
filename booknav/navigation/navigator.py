"""Locate the current unit in the reading order and derive its pager links."""

from __future__ import annotations

import typing as typ

from booknav.navigation.models import NavigationResult, UnknownCurrentUnitError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from booknav.navigation.models import FlattenedEntry
    from booknav.tree.models import Identity, Section


def locate(
    entries: cabc.Sequence[FlattenedEntry],
    current: Identity,
    *,
    root: Section | None = None,
) -> NavigationResult:
    """Return previous/next links and the position of ``current``.

    Parameters
    ----------
    entries : Sequence[FlattenedEntry]
        Output of :func:`booknav.navigation.flatten`.
    current : Identity
        Identity of the unit being rendered. A chapter's front-page identity
        resolves to the chapter entry.
    root : Section, optional
        Root section; when ``current`` equals its identity the overview page
        is being rendered and the position is ``0``.

    Returns
    -------
    NavigationResult
        Neighbouring identities (``None`` at the sequence boundaries), the
        1-based position, and the total number of entries.

    Raises
    ------
    UnknownCurrentUnitError
        If ``current`` is neither the root nor any entry's unit.

    Examples
    --------
    >>> from booknav.tree import Section
    >>> locate([], "", root=Section("", "Book")).position_label
    '0 / 0'
    """
    total = len(entries)
    if root is not None and current == root.identity:
        first = entries[0] if entries else None
        return NavigationResult(
            previous=None,
            next=first.identity if first else None,
            current=0,
            total=total,
            next_unit=first.unit if first else None,
        )

    position = next(
        (idx for idx, entry in enumerate(entries) if entry.unit.matches(current)),
        None,
    )
    if position is None:
        raise UnknownCurrentUnitError(current)

    before = entries[position - 1] if position > 0 else None
    after = entries[position + 1] if position + 1 < total else None
    return NavigationResult(
        previous=before.identity if before else None,
        next=after.identity if after else None,
        current=entries[position].sequence_number,
        total=total,
        previous_unit=before.unit if before else None,
        next_unit=after.unit if after else None,
    )


__all__ = ["locate"]
