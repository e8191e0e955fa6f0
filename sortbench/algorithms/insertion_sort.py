from typing import List

from .algorithm import SortAlgorithm


class InsertionSort(SortAlgorithm):
    """
    Insertion sort building a sorted prefix.

    Larger elements are shifted one slot right (one write each) and the
    current element is then inserted (one write), even when nothing moved.

    Time Complexity: O(n^2) - worst case, best case O(n)
    Space Complexity: O(1)
    """

    def _sort(self, array: List[int]) -> None:
        for i in range(1, len(array)):
            current = array[i]
            j = i - 1

            while j >= 0 and current < array[j]:
                array[j + 1] = array[j]
                self.profiler.report_write()
                j -= 1

            array[j + 1] = current
            self.profiler.report_write()

    def get_algorithm_name(self) -> str:
        return "InsertionSort"
