"""Power set enumeration."""

from __future__ import annotations

from collections.abc import Iterator, Sequence


def subsets(nums: Sequence[int]) -> list[list[int]]:
    """Return every subset of ``nums``.

    Subsets are produced depth first, taking each element before leaving
    it out, so the full sequence comes first and the empty one last.
    """
    items = list(nums)

    def walk(index: int, chosen: list[int]) -> Iterator[list[int]]:
        if index >= len(items):
            yield list(chosen)
            return
        chosen.append(items[index])
        yield from walk(index + 1, chosen)
        chosen.pop()
        yield from walk(index + 1, chosen)

    return list(walk(0, []))