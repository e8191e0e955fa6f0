from typing import List

from .algorithm import SortAlgorithm


class HeapSort(SortAlgorithm):
    """Heap sort on an in-place binary max-heap."""

    def _sort(self, array: List[int]) -> None:
        length = len(array)
        for root in range(length // 2 - 1, -1, -1):
            self._sift_down(array, length, root)

        for end in range(length - 1, 0, -1):
            self._swap(array, 0, end)
            self._sift_down(array, end, 0)

    def _sift_down(self, array: List[int], heap_size: int, root: int) -> None:
        while True:
            largest = root
            left = 2 * root + 1
            right = 2 * root + 2

            if left < heap_size and array[left] > array[largest]:
                largest = left
            if right < heap_size and array[right] > array[largest]:
                largest = right

            if largest == root:
                return

            self._swap(array, root, largest)
            root = largest

    def get_algorithm_name(self) -> str:
        return "HeapSort"
