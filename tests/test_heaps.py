import pytest

from dsreview.heaps import HeapEmptyError, MaxHeap, MinHeap, NoRootParentError


def contents(heap):
    return [heap.value(i) for i in range(len(heap))]


@pytest.mark.parametrize("heap_cls", [MaxHeap, MinHeap])
def test_get_parent_of_root_raises(heap_cls):
    with pytest.raises(NoRootParentError):
        heap_cls().get_parent(0)


@pytest.mark.parametrize("heap_cls", [MaxHeap, MinHeap])
@pytest.mark.parametrize(
    ("index", "parent"), [(1, 0), (2, 0), (3, 1), (4, 1), (5, 2), (6, 2)]
)
def test_get_parent(heap_cls, index, parent):
    assert heap_cls().get_parent(index) == parent


@pytest.mark.parametrize("heap_cls", [MaxHeap, MinHeap])
def test_child_indices(heap_cls):
    heap = heap_cls()
    assert heap.get_left_child(0) == 1
    assert heap.get_right_child(0) == 2
    assert heap.get_left_child(2) == 5
    assert heap.get_right_child(2) == 6


def test_has_children():
    heap = MaxHeap()
    heap.insert(1)
    heap.insert(2)
    assert heap.has_left_child(0) is True
    assert heap.has_right_child(0) is False
    assert heap.has_left_child(1) is False


def test_max_heap_insert():
    heap = MaxHeap()
    for item in (10, 20, 30):
        heap.insert(item)
    assert contents(heap) == [30, 10, 20]


def test_max_heap_extract_max():
    heap = MaxHeap()
    for item in (10, 20, 30, 40):
        heap.insert(item)
    assert heap.extract_max() == 40
    assert contents(heap) == [30, 10, 20]


def test_min_heap_insert():
    heap = MinHeap()
    for item in (30, 20, 10):
        heap.insert(item)
    assert contents(heap) == [10, 30, 20]


def test_min_heap_extract_min():
    heap = MinHeap()
    for item in (10, 20, 30, 40):
        heap.insert(item)
    assert heap.extract_min() == 10
    assert contents(heap) == [20, 40, 30]


def test_peek_and_len():
    heap = MinHeap()
    for item in (5, 3, 8):
        heap.insert(item)
    assert heap.peek() == 3
    assert len(heap) == 3


@pytest.mark.parametrize("heap_cls", [MaxHeap, MinHeap])
def test_peek_empty_raises(heap_cls):
    with pytest.raises(HeapEmptyError):
        heap_cls().peek()


def test_extract_empty_raises():
    with pytest.raises(HeapEmptyError):
        MaxHeap().extract_max()
    with pytest.raises(HeapEmptyError):
        MinHeap().extract_min()


def test_extraction_order():
    values = [7, 2, 9, 4, 4, 1, 8, 3]
    max_heap, min_heap = MaxHeap(), MinHeap()
    for item in values:
        max_heap.insert(item)
        min_heap.insert(item)
    assert [max_heap.extract_max() for _ in values] == sorted(values, reverse=True)
    assert [min_heap.extract_min() for _ in values] == sorted(values)
    assert len(max_heap) == 0
    assert len(min_heap) == 0