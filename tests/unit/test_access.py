"""
Tests for the access-counting item container.
"""

from knapsack_bnb.data.access import CountingItems
from knapsack_bnb.data.items import Catalogue, Item


class TestCountingItems:
    """Test suite for CountingItems."""

    def test_index_reads_are_counted(self):
        items = CountingItems([Item(1, 1), Item(2, 2)])
        _ = items[0]
        _ = items[1]
        _ = items[0]
        assert items.access_count == 3
        assert items.read_counter() == 3

    def test_reset_counter(self):
        items = CountingItems([Item(1, 1)])
        _ = items[0]
        items.reset_counter()
        assert items.access_count == 0

    def test_iteration_len_and_sort_not_counted(self):
        items = CountingItems([Item(4, 1), Item(1, 5), Item(2, 2)])
        assert len(items) == 3
        assert [item.weight for item in items] == [4, 1, 2]
        items.sort(key=lambda item: item.ratio, reverse=True)
        assert items.access_count == 0

    def test_behaves_like_a_list(self):
        items = CountingItems()
        items.append(Item(1, 1))
        items.insert(0, Item(2, 2))
        assert items == [Item(2, 2), Item(1, 1)]
        del items[0]
        assert items == [Item(1, 1)]

    def test_catalogue_sort_does_not_count(self, counting_scenario_catalogue):
        counting_scenario_catalogue.sort_by_ratio_descending()
        assert counting_scenario_catalogue.items.access_count == 0

    def test_plain_catalogue_uses_list(self, scenario_catalogue):
        assert type(scenario_catalogue.items) is list

    def test_copy_with_counting_container(self, scenario_catalogue):
        counted = scenario_catalogue.copy(container_factory=CountingItems)
        assert isinstance(counted.items, CountingItems)
        assert counted.items == list(scenario_catalogue)

    def test_counting_catalogue_from_pairs(self):
        catalogue = Catalogue.from_pairs([(1, 2)], 3, container_factory=CountingItems)
        assert catalogue.items.access_count == 0
