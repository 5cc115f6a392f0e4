import pytest

from dsalgo.setops import difference, intersection, merge, union, union_unsorted


def test_merge_is_sorted_combination():
    a = [5, 10, 15, 20, 25]
    b = [2, 4, 6, 8, 10]
    result = merge(a, b)
    assert result == sorted(a + b)


def test_merge_keeps_duplicates():
    assert merge([1], [1]) == [1, 1]


def test_merge_with_empty():
    assert merge([], [1, 2]) == [1, 2]
    assert merge([3], []) == [3]


def test_union_sorted_inputs():
    a = [2, 4, 6, 8, 10]
    b = [5, 10, 15, 20, 25]
    assert union(a, b) == sorted(set(a) | set(b))


def test_intersection():
    a = [2, 3, 4, 5, 6]
    b = [1, 3, 5, 7, 9]
    assert intersection(a, b) == sorted(set(a) & set(b))
    assert intersection(a, []) == []


def test_difference():
    a = [2, 3, 4, 5, 6]
    b = [1, 3, 5, 7, 9]
    assert difference(a, b) == sorted(set(a) - set(b))
    assert difference(a, []) == a
    assert difference([], b) == []


@pytest.mark.parametrize(
    "a, b",
    [([2, 3, 4, 5, 6], [1, 3, 5, 7, 9]), ([1, 2], [3, 4]), ([1, 2], [1, 2])],
)
def test_union_is_intersection_plus_differences(a, b):
    combined = sorted(intersection(a, b) + difference(a, b) + difference(b, a))
    assert union(a, b) == combined


def test_union_unsorted():
    a = [11, 23, 43, 54, 67]
    b = [23, 67, 20, 56, 76]
    result = union_unsorted(a, b)
    assert result[: len(a)] == a
    assert set(result) == set(a) | set(b)
    assert len(result) == len(set(result))


def test_union_unsorted_keeps_order_of_new_values():
    result = union_unsorted([3], [9, 3, 1])
    assert result == [3, 9, 1]