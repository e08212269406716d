from leetsolve.subsets import subsets


def test_subsets_example():
    expected = [[], [1], [2], [1, 2], [3], [1, 3], [2, 3], [1, 2, 3]]
    assert sorted(subsets([1, 2, 3])) == sorted(expected)


def test_subsets_count_is_power_of_two():
    for n in range(6):
        assert len(subsets(list(range(n)))) == 2 ** n


def test_subsets_of_empty():
    assert subsets([]) == [[]]


def test_subsets_order_full_first_empty_last():
    result = subsets([1, 2, 3])
    assert result[0] == [1, 2, 3]
    assert result[-1] == []


def test_subsets_are_distinct_and_preserve_order():
    nums = [4, 8, 15, 16]
    result = subsets(nums)
    assert len({tuple(s) for s in result}) == len(result)
    for subset in result:
        positions = [nums.index(v) for v in subset]
        assert positions == sorted(positions)


def test_subsets_results_are_independent_lists():
    result = subsets([1, 2])
    result[0].append(99)
    assert [1, 2] in subsets([1, 2])
    assert all(99 not in s for s in result[1:])