from typing import Any, Hashable, Iterator, List, Optional, Tuple

NIL = -1


class RecencyList:
    """Doubly linked recency list stored in parallel slot arrays.

    Entries are addressed by integer handles that stay valid across moves, so
    an index can map keys to handles without holding node references. Front
    is the most recently used entry, back the next one to evict.
    """

    def __init__(self) -> None:
        self.clear()

    def clear(self) -> None:
        self._keys: List[Any] = []
        self._values: List[Any] = []
        self._prev: List[int] = []
        self._next: List[int] = []
        self._live: List[bool] = []
        self._free: List[int] = []
        self._head = NIL
        self._tail = NIL
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Tuple[Any, Any]]:
        handle = self._head
        while handle != NIL:
            yield self._keys[handle], self._values[handle]
            handle = self._next[handle]

    def front(self) -> Optional[int]:
        return None if self._head == NIL else self._head

    def back(self) -> Optional[int]:
        return None if self._tail == NIL else self._tail

    def key(self, handle: int) -> Hashable:
        self._check(handle)
        return self._keys[handle]

    def value(self, handle: int) -> Any:
        self._check(handle)
        return self._values[handle]

    def set_value(self, handle: int, value: Any) -> None:
        self._check(handle)
        self._values[handle] = value

    def push_front(self, key: Hashable, value: Any) -> int:
        if self._free:
            handle = self._free.pop()
            self._keys[handle] = key
            self._values[handle] = value
            self._live[handle] = True
        else:
            handle = len(self._keys)
            self._keys.append(key)
            self._values.append(value)
            self._prev.append(NIL)
            self._next.append(NIL)
            self._live.append(True)
        self._link_front(handle)
        self._size += 1
        return handle

    def move_to_front(self, handle: int) -> None:
        self._check(handle)
        if handle == self._head:
            return
        self._unlink(handle)
        self._link_front(handle)

    def remove(self, handle: int) -> Tuple[Any, Any]:
        """Unlink ``handle`` and release its slot for reuse."""

        self._check(handle)
        self._unlink(handle)
        key, value = self._keys[handle], self._values[handle]
        # release payload references so a freed slot keeps nothing alive
        self._keys[handle] = None
        self._values[handle] = None
        self._live[handle] = False
        self._free.append(handle)
        self._size -= 1
        return key, value

    def _check(self, handle: int) -> None:
        if not (0 <= handle < len(self._live)) or not self._live[handle]:
            raise KeyError(f"Stale or unknown handle: {handle}")

    def _link_front(self, handle: int) -> None:
        self._prev[handle] = NIL
        self._next[handle] = self._head
        if self._head != NIL:
            self._prev[self._head] = handle
        self._head = handle
        if self._tail == NIL:
            self._tail = handle

    def _unlink(self, handle: int) -> None:
        prev_handle = self._prev[handle]
        next_handle = self._next[handle]
        if prev_handle != NIL:
            self._next[prev_handle] = next_handle
        else:
            self._head = next_handle
        if next_handle != NIL:
            self._prev[next_handle] = prev_handle
        else:
            self._tail = prev_handle
        self._prev[handle] = NIL
        self._next[handle] = NIL
