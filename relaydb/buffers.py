"""Growable double-ended byte buffer and fixed ring allocator."""

from __future__ import annotations


class VariableBuffer:
    """A byte buffer that grows and can be pushed and popped at both ends."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buf = bytearray(capacity)
        self._offset = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def data(self) -> bytes:
        """Return a copy of the bytes held."""
        return bytes(self._buf[self._offset:self._offset + self._size])

    def __len__(self) -> int:
        return self._size

    def _grow_for(self, n: int) -> bool:
        if n > self.capacity - self._size:
            new_capacity = max(self.capacity, n) * 2
            self._buf.extend(bytes(new_capacity - self.capacity))
            return True
        return False

    def push_front(self, data: bytes) -> None:
        """Insert bytes before the current contents."""
        n = len(data)
        self._grow_for(n)
        if self._offset < n:
            start = self.capacity - self._size
            self._buf[start:start + self._size] = self._buf[self._offset:self._offset + self._size]
            self._offset = start
        self._buf[self._offset - n:self._offset] = data
        self._offset -= n
        self._size += n

    def push_back(self, data: bytes) -> None:
        """Append bytes after the current contents."""
        n = len(data)
        if not self._grow_for(n) and n > self.capacity - self._offset - self._size:
            self._buf[0:self._size] = self._buf[self._offset:self._offset + self._size]
            self._offset = 0
        end = self._offset + self._size
        self._buf[end:end + n] = data
        self._size += n

    def pop_front(self, size: int) -> bytes:
        """Remove and return ``size`` bytes from the front."""
        self._check_pop(size)
        out = bytes(self._buf[self._offset:self._offset + size])
        self._offset += size
        if self._offset >= self.capacity:
            self._offset = 0
        self._size -= size
        return out

    def pop_back(self, size: int) -> bytes:
        """Remove and return ``size`` bytes from the back."""
        self._check_pop(size)
        end = self._offset + self._size
        out = bytes(self._buf[end - size:end])
        self._size -= size
        return out

    def _check_pop(self, size: int) -> None:
        if size < 0 or size > self._size:
            raise ValueError(f"cannot pop {size} bytes from a buffer of {self._size}")

    def clear(self) -> None:
        self._offset = 0
        self._size = 0

    prepend = push_front
    append = push_back
    insert = push_back

    def remove(self, size: int) -> None:
        """Discard ``size`` bytes from the front."""
        self.pop_front(size)


class RingBuffer:
    """A fixed-size region handing out contiguous slices in FIFO order."""

    def __init__(self, capacity: int = 0) -> None:
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self._buf = bytearray(capacity)
        self._head = 0
        self._tail = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._buf)

    def alloc(self, size: int) -> memoryview:
        """Reserve ``size`` contiguous bytes and return a view of them.

        Raises BufferError when no contiguous region of that size is free.
        """
        cap = self.capacity
        start = None
        if self._head < self._tail or self._size == 0:
            if cap - self._tail >= size:
                start = self._tail
                self._tail += size
                if self._tail == cap:
                    self._tail = 0
            elif self._head >= size:
                start = 0
                self._tail = size
        elif self._head - self._tail >= size:
            start = self._tail
            self._tail += size
        if start is None:
            raise BufferError(f"no room for {size} bytes in ring buffer")
        self._size += size
        return memoryview(self._buf)[start:start + size]

    def free(self, size: int) -> None:
        """Release the oldest ``size`` bytes."""
        if size < 0 or size > self._size:
            raise ValueError(f"cannot free {size} bytes of {self._size} in use")
        self._size -= size
        if size <= self.capacity - self._head:
            self._head += size
            if self._head == self.capacity:
                self._head = 0
        else:
            self._head = size

    def clear(self) -> None:
        self._head = 0
        self._tail = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size