from typing import List

from .algorithm import SortAlgorithm


class BubbleSort(SortAlgorithm):
    """
    Bubble sort with a shrinking pass boundary.

    Each pass ends at the index of the previous pass's last swap, since
    everything behind it is already in place.

    Time Complexity: O(n^2) - worst case, best case O(n)
    Space Complexity: O(1)
    """

    def _sort(self, array: List[int]) -> None:
        boundary = len(array) - 1

        while boundary > 0:
            last_swap = 0
            for i in range(boundary):
                if array[i] > array[i + 1]:
                    self._swap(array, i, i + 1)
                    last_swap = i
            boundary = last_swap

    def get_algorithm_name(self) -> str:
        return "BubbleSort"
