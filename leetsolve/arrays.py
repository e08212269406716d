"""Index searches over integer sequences."""

from __future__ import annotations

from collections.abc import Sequence


def two_sum(nums: Sequence[int], target: int) -> list[int]:
    """Return the indices of two entries of ``nums`` that add up to ``target``.

    The index of the later entry comes first. An empty list is returned
    when no such pair exists.
    """
    seen: dict[int, int] = {}
    for index, value in enumerate(nums):
        partner = seen.get(target - value)
        if partner is not None:
            return [index, partner]
        seen[value] = index
    return []


def two_sum_sorted(numbers: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions of two entries of sorted ``numbers`` summing to ``target``.

    An empty list is returned when no such pair exists.
    """
    left, right = 0, len(numbers) - 1
    while left < right:
        total = numbers[left] + numbers[right]
        if total == target:
            return [left + 1, right + 1]
        if total < target:
            left += 1
        else:
            right -= 1
    return []


def search_rotated(nums: Sequence[int], target: int) -> int:
    """Return the index of ``target`` in a rotated sorted sequence, or -1 if absent.

    Raises ValueError if ``nums`` is empty.
    """
    if not nums:
        raise ValueError("nums must not be empty")

    left, right = 0, len(nums) - 1
    while left <= right:
        mid = (left + right) // 2
        if nums[mid] == target:
            return mid
        if nums[left] <= nums[mid]:
            if nums[left] <= target < nums[mid]:
                right = mid - 1
            else:
                left = mid + 1
        elif nums[mid] < target <= nums[right]:
            left = mid + 1
        else:
            right = mid - 1
    return -1