"""
Sorting producers.

Each sort runs on a copy of the input array and records every comparison
and write as an event. Mutation events carry a fresh copy of the whole
array so a renderer never has to replay earlier events to draw a step.

Every log starts with `init` and ends with `done`. Within an inner step the
comparison is recorded before the mutation, and a `clear` closes the step.
The `line` in each payload points into the display source below.
"""

from typing import Any, Iterable, List

from ..core.events import Event, EventRecorder, EventType, error_log
from ..core.snapshots import coerce_array

NON_NUMERIC_MESSAGE = "Enter numbers only to sort."

BUBBLE_SOURCE = (
    "def bubble_sort(arr):",
    "    a = list(arr)",
    "    swapped = True",
    "    i = 0",
    "    while i < len(a) - 1 and swapped:",
    "        swapped = False",
    "        for j in range(len(a) - 1 - i):",
    "            if a[j] > a[j + 1]:",
    "                a[j], a[j + 1] = a[j + 1], a[j]",
    "                swapped = True",
    "        # a[len(a) - 1 - i] is in place",
    "        i += 1",
    "    return a",
)

INSERTION_SOURCE = (
    "def insertion_sort(arr):",
    "    a = list(arr)",
    "    for i in range(1, len(a)):",
    "        key = a[i]",
    "        j = i - 1",
    "        while j >= 0 and a[j] > key:",
    "            a[j + 1] = a[j]",
    "            j -= 1",
    "        a[j + 1] = key",
    "        # a[0..i] is sorted",
    "    return a",
)

MERGE_SOURCE = (
    "def merge_sort(arr):",
    "    a = list(arr)",
    "    temp = [0] * len(a)",
    "    def merge(l, m, r):",
    "        temp[l:r + 1] = a[l:r + 1]",
    "        i, j, k = l, m + 1, l",
    "        while i <= m and j <= r:",
    "            if temp[i] <= temp[j]:",
    "                a[k] = temp[i]; i += 1",
    "            else:",
    "                a[k] = temp[j]; j += 1",
    "            k += 1",
    "        # copy the rest of whichever half remains",
    "        a[k:r + 1] = temp[i:m + 1] + temp[j:r + 1]",
    "    def sort(l, r):",
    "        if l >= r:",
    "            return",
    "        m = (l + r) // 2",
    "        sort(l, m); sort(m + 1, r)",
    "        merge(l, m, r)",
    "    sort(0, len(a) - 1)",
    "    return a",
)

QUICK_SOURCE = (
    "def quick_sort(arr):",
    "    a = list(arr)",
    "    def partition(low, high):",
    "        pivot = a[high]",
    "        i = low",
    "        for j in range(low, high):",
    "            if a[j] <= pivot:",
    "                a[i], a[j] = a[j], a[i]",
    "                i += 1",
    "        a[i], a[high] = a[high], a[i]",
    "        return i",
    "    def qs(low, high):",
    "        if low < high:",
    "            p = partition(low, high)",
    "            qs(low, p - 1); qs(p + 1, high)",
    "    qs(0, len(a) - 1)",
    "    return a",
)


def bubble_sort(arr: Iterable[Any]) -> List[Event]:
    """
    Bubble sort with early exit.

    Events: init, compare(i, j), swap(i, j, a), clear, markSortedEnd(index), done.
    After each pass the last unsorted slot is final.
    """
    a = coerce_array(arr)
    if a is None:
        return error_log(NON_NUMERIC_MESSAGE)

    rec = EventRecorder()
    rec.emit(EventType.INIT, a=list(a), line=2)

    swapped = True
    i = 0
    while i < len(a) - 1 and swapped:
        swapped = False
        for j in range(len(a) - 1 - i):
            rec.emit(EventType.COMPARE, i=j, j=j + 1, line=8)
            if a[j] > a[j + 1]:
                a[j], a[j + 1] = a[j + 1], a[j]
                swapped = True
                rec.emit(EventType.SWAP, i=j, j=j + 1, a=list(a), line=9)
            rec.emit(EventType.CLEAR)
        rec.emit(EventType.MARK_SORTED_END, index=len(a) - 1 - i, line=11)
        i += 1

    rec.emit(EventType.DONE, line=13)
    return rec.events


def insertion_sort(arr: Iterable[Any]) -> List[Event]:
    """
    Insertion sort.

    Events: init, clear, compare(i, j, key), shift(from, to, a),
    insert(index, value, a), markSortedPrefix(up_to), done.
    """
    a = coerce_array(arr)
    if a is None:
        return error_log(NON_NUMERIC_MESSAGE)

    rec = EventRecorder()
    rec.emit(EventType.INIT, a=list(a), line=2)

    for i in range(1, len(a)):
        key = a[i]
        j = i - 1
        rec.emit(EventType.CLEAR)
        rec.emit(EventType.COMPARE, i=i, j=j, key=key, line=4)

        while j >= 0 and a[j] > key:
            rec.emit(EventType.COMPARE, i=i, j=j, key=key, line=6)
            a[j + 1] = a[j]
            rec.emit(EventType.SHIFT, **{"from": j, "to": j + 1, "a": list(a), "line": 7})
            j -= 1
            rec.emit(EventType.CLEAR, line=8)

        a[j + 1] = key
        rec.emit(EventType.INSERT, index=j + 1, value=key, a=list(a), line=9)
        rec.emit(EventType.MARK_SORTED_PREFIX, up_to=i, line=10)

    rec.emit(EventType.DONE, line=11)
    return rec.events


def merge_sort(arr: Iterable[Any]) -> List[Event]:
    """
    Top-down merge sort.

    Events: init, markSubarray(l, r), compare(i, j), overwrite(k, value, a),
    clear, done. compare indices refer to positions in the merge buffer.
    """
    a = coerce_array(arr)
    if a is None:
        return error_log(NON_NUMERIC_MESSAGE)

    rec = EventRecorder()
    rec.emit(EventType.INIT, a=list(a), line=2)
    temp = [0] * len(a)

    def merge(l: int, m: int, r: int) -> None:
        temp[l:r + 1] = a[l:r + 1]
        i, j, k = l, m + 1, l

        while i <= m and j <= r:
            rec.emit(EventType.COMPARE, i=i, j=j, line=8)
            if temp[i] <= temp[j]:
                a[k] = temp[i]
                rec.emit(EventType.OVERWRITE, k=k, value=temp[i], a=list(a), line=9)
                i += 1
            else:
                a[k] = temp[j]
                rec.emit(EventType.OVERWRITE, k=k, value=temp[j], a=list(a), line=11)
                j += 1
            k += 1
            rec.emit(EventType.CLEAR)

        while i <= m:
            a[k] = temp[i]
            rec.emit(EventType.OVERWRITE, k=k, value=temp[i], a=list(a), line=14)
            i += 1
            k += 1

        while j <= r:
            a[k] = temp[j]
            rec.emit(EventType.OVERWRITE, k=k, value=temp[j], a=list(a), line=14)
            j += 1
            k += 1

    def sort(l: int, r: int) -> None:
        rec.emit(EventType.MARK_SUBARRAY, l=l, r=r, line=15)
        if l >= r:
            return
        m = (l + r) // 2
        sort(l, m)
        sort(m + 1, r)
        merge(l, m, r)

    if a:
        sort(0, len(a) - 1)

    rec.emit(EventType.DONE, line=22)
    return rec.events


def quick_sort(arr: Iterable[Any]) -> List[Event]:
    """
    Quick sort with Lomuto partition (pivot = last element of the range).

    Events: init, markSubarray(l, r), setPivot(p, value), compareWithPivot(j, p),
    swap(i, j, a), clear, markSortedIndex(index), done.
    """
    a = coerce_array(arr)
    if a is None:
        return error_log(NON_NUMERIC_MESSAGE)

    rec = EventRecorder()
    rec.emit(EventType.INIT, a=list(a), line=2)

    def swap(i: int, j: int, line: int) -> None:
        a[i], a[j] = a[j], a[i]
        rec.emit(EventType.SWAP, i=i, j=j, a=list(a), line=line)

    def partition(low: int, high: int) -> int:
        rec.emit(EventType.MARK_SUBARRAY, l=low, r=high, line=3)
        pivot = a[high]
        rec.emit(EventType.SET_PIVOT, p=high, value=pivot, line=4)

        i = low
        for j in range(low, high):
            rec.emit(EventType.COMPARE_WITH_PIVOT, j=j, p=high, line=7)
            if a[j] <= pivot:
                if i != j:
                    swap(i, j, 8)
                i += 1
            rec.emit(EventType.CLEAR)

        if i != high:
            swap(i, high, 10)
        rec.emit(EventType.MARK_SORTED_INDEX, index=i, line=11)
        return i

    # pending (low, high) ranges; the right half is pushed first so the
    # left half is marked and partitioned first
    ranges = [(0, len(a) - 1)] if a else []
    while ranges:
        low, high = ranges.pop()
        rec.emit(EventType.MARK_SUBARRAY, l=low, r=high, line=12)
        if low >= high:
            continue
        p = partition(low, high)
        ranges.append((p + 1, high))
        ranges.append((low, p - 1))

    rec.emit(EventType.DONE, line=17)
    return rec.events
