from edakit.linked_list import LinkedList, Node, Queue, Stack


def _sample_list():
    lst = LinkedList()
    for value in (1, 3, 5, 15, 5, 17):
        lst.insert_first(value)
    return lst


def test_insert_first_order():
    assert list(_sample_list()) == [17, 5, 15, 5, 3, 1]


def test_str_format():
    assert str(_sample_list()) == "17 -> 5 -> 15 -> 5 -> 3 -> 1 -> "


def test_remove_all_occurrences():
    lst = _sample_list()
    lst.remove(5)
    lst.remove(17)
    assert list(lst) == [15, 3, 1]
    assert len(lst) == 3


def test_clear_then_insert_last_and_find_update():
    lst = _sample_list()
    lst.clear()
    assert len(lst) == 0
    for value in (2, 12, 2):
        lst.insert_last(value)
    assert list(lst) == [2, 12, 2]
    node = lst.find(12)
    node.data = 18
    assert list(lst) == [2, 18, 2]


def test_find_missing_returns_none():
    lst = _sample_list()
    assert lst.find(99) is None


def test_find_returns_node():
    node = _sample_list().find(15)
    assert isinstance(node, Node) and node.data == 15


def test_remove_first_and_on_empty():
    lst = _sample_list()
    lst.remove_first()
    assert list(lst) == [5, 15, 5, 3, 1]
    empty = LinkedList()
    empty.remove_first()
    assert list(empty) == []


def test_remove_consecutive_duplicates():
    lst = LinkedList()
    for value in (4, 4, 1, 4, 4):
        lst.insert_last(value)
    lst.remove(4)
    assert list(lst) == [1]


def test_stack_push_order():
    stack = Stack()
    for value in (0, 10, 20, 30):
        stack.push(value)
    assert stack.top() == 30
    assert list(stack) == [30, 20, 10, 0]
    assert len(stack) == 4


def test_stack_pop_drains():
    stack = Stack()
    for value in (0, 10, 20, 30):
        stack.push(value)
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
    assert popped == [30, 20, 10, 0]
    assert stack.pop() is None
    assert stack.top() is None


def test_stack_clear():
    stack = Stack()
    stack.push("a")
    stack.clear()
    assert stack.is_empty() is True


def test_queue_fifo():
    queue = Queue()
    for value in "abc":
        queue.push(value)
    assert queue.top() == "a"
    assert list(queue) == ["a", "b", "c"]
    assert queue.pop() == "a"
    assert queue.pop() == "b"
    assert queue.pop() == "c"
    assert queue.is_empty() is True
    assert queue.pop() is None


def test_queue_reuse_after_empty():
    queue = Queue()
    queue.push(1)
    queue.pop()
    queue.push(2)
    queue.push(3)
    assert list(queue) == [2, 3]
    assert len(queue) == 2
    queue.clear()
    assert len(queue) == 0