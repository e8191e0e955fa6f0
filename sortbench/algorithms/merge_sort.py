from typing import List

from .algorithm import SortAlgorithm


class MergeSort(SortAlgorithm):
    """
    Top-down, stable two-way merge sort.

    Writes are counted per element placed into the merge buffer and per
    element copied back into the array. Memory is sampled after every
    recursive step so the buffer allocations show up in MEMORY_USAGE mode.

    Time Complexity: O(n log n)
    Space Complexity: O(n)
    """

    def _sort(self, array: List[int]) -> None:
        if len(array) > 1:
            self._merge_sort(array, 0, len(array))

    def _merge_sort(self, array: List[int], left: int, right: int) -> None:
        if right - left > 1:
            mid = (left + right) // 2
            self._merge_sort(array, left, mid)
            self._merge_sort(array, mid, right)
            self._merge(array, left, mid, right)

        self.profiler.sample_memory()

    def _merge(self, array: List[int], left: int, mid: int, right: int) -> None:
        buffer: List[int] = []
        i, j = left, mid

        while i < mid and j < right:
            # '<=' keeps equal elements in input order
            if array[i] <= array[j]:
                buffer.append(array[i])
                i += 1
            else:
                buffer.append(array[j])
                j += 1
            self.profiler.report_write()

        buffer.extend(array[i:mid])
        self.profiler.report_write(mid - i)
        buffer.extend(array[j:right])
        self.profiler.report_write(right - j)

        array[left:right] = buffer
        self.profiler.report_write(len(buffer))

    def get_algorithm_name(self) -> str:
        return "MergeSort"
