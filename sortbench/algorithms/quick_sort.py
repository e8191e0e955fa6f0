from typing import List

from .algorithm import SortAlgorithm


class QuickSort(SortAlgorithm):
    """
    Quick sort with a first-element pivot and two-pointer partitioning.

    Only the smaller partition is sorted recursively; the larger one is
    handled by the enclosing loop, which keeps the stack depth logarithmic
    even on already sorted input.

    Time Complexity: O(n^2) - worst case, average case O(n log n)
    Space Complexity: O(log n)
    """

    def _sort(self, array: List[int]) -> None:
        self._quick_sort(array, 0, len(array))

    def _quick_sort(self, array: List[int], start: int, end: int) -> None:
        while end - start > 1:
            pivot = self._partition(array, start, end)
            if pivot - start < end - pivot - 1:
                self._quick_sort(array, start, pivot)
                start = pivot + 1
            else:
                self._quick_sort(array, pivot + 1, end)
                end = pivot

    def _partition(self, array: List[int], start: int, end: int) -> int:
        pivot_value = array[start]
        left = start + 1
        right = end - 1

        while left <= right:
            while left <= right and array[left] < pivot_value:
                left += 1
            while left <= right and array[right] >= pivot_value:
                right -= 1
            if left < right:
                self._swap(array, left, right)
                left += 1
                right -= 1

        # Pivot placement counts as a swap even when it stays put
        self._swap(array, start, right)
        return right

    def get_algorithm_name(self) -> str:
        return "QuickSort"
