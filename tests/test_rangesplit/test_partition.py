import pytest

from thds.rangesplit.partition import build_partition


@pytest.mark.parametrize(
    "min_, max_, parts, endianness, expected_at",
    [
        pytest.param(1, 10, 2, "big", 5),
        pytest.param(1, 10, 3, "big", 4),
        pytest.param(1, 10, 2, "little", 4),
        pytest.param(1, 10, 3, "little", 3),
        pytest.param(-10, -1, 2, "big", -6),
        pytest.param(65, 122, 2, "big", 93),
        pytest.param(1, 4, 10, "big", 1),
        pytest.param(1, 4, 10, "little", 1, id="size-one-head-is-not-emptied"),
        pytest.param(1, 2, 2, "little", 1),
    ],
)
def test_boundary(min_, max_, parts, endianness, expected_at):
    partition = build_partition(min_, max_, parts, endianness)
    assert not partition.at_end
    assert partition.at == expected_at
    assert partition.count == max_ - min_ + 1


@pytest.mark.parametrize("endianness", ["big", "little"])
def test_single_element_cannot_be_subdivided(endianness):
    partition = build_partition(7, 7, 3, endianness)
    assert partition.at_end
    assert partition.at is None


def test_ceiling_is_exact_for_huge_ordinals():
    big = 10**30
    partition = build_partition(0, big, 3, "big")
    assert partition.at == (big + 1 + 2) // 3 - 1


def test_one_part_is_not_a_partition():
    with pytest.raises(AssertionError):
        build_partition(1, 10, 1, "big")
