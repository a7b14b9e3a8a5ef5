from collections.abc import Buffer, Callable

type BlockProcessor = Callable[[bytearray], None]


def check_range(data: Buffer, offset: int = 0, length: int | None = None) -> memoryview:
    """Validate a sub-range of a bytes-like object.

    Args:
        data: The source bytes.
        offset: Index of the first byte.
        length: Number of bytes, `None` to read until the end.

    Returns:
        A read-only byte view of the range, without copying.
    """
    if data is None:
        raise TypeError("data must be a bytes-like object, not None")

    view = memoryview(data).cast("B")
    size = len(view)
    if length is None:
        length = size - offset

    if offset < 0 or length < 0 or offset > size - length:
        raise ValueError(
            f"Range [offset={offset}, length={length}] out of bounds for {size} bytes"
        )

    return view[offset : offset + length].toreadonly()


class BlockAccumulator:
    """Buffers appended bytes into fixed-size blocks.

    `process_block` receives the internal buffer each time it fills. The buffer
    is reused for the next block, so the callback must not keep a reference.
    """

    _block_size: int
    _process_block: BlockProcessor
    _buffer: bytearray
    _position: int
    _blocks_processed: int

    def __init__(self, block_size: int, process_block: BlockProcessor) -> None:
        if block_size <= 0:
            raise ValueError(f"Block size must be greater than 0, got {block_size}")

        self._block_size = block_size
        self._process_block = process_block
        self._buffer = bytearray(block_size)
        self._position = 0
        self._blocks_processed = 0

    @property
    def block_size(self) -> int:
        return self._block_size

    @property
    def blocks_processed(self) -> int:
        """Number of full message blocks passed to the callback"""
        return self._blocks_processed

    @property
    def position(self) -> int:
        """Number of pending bytes in the current block"""
        return self._position

    @property
    def remaining(self) -> int:
        return self._block_size - self._position

    def append(self, data: Buffer, offset: int = 0, length: int | None = None) -> None:
        view = check_range(data, offset, length)

        consumed = 0
        total = len(view)
        while consumed < total:
            count = min(total - consumed, self.remaining)
            end = self._position + count
            self._buffer[self._position : end] = view[consumed : consumed + count]
            self._position = end
            consumed += count

            if self._position == self._block_size:
                self._process_block(self._buffer)
                self._position = 0
                self._blocks_processed += 1

    def put(self, data: Buffer) -> None:
        """Write bytes into the current block without processing it."""
        view = check_range(data)
        if len(view) > self.remaining:
            raise ValueError(
                f"Cannot put {len(view)} bytes, only {self.remaining} left in block"
            )

        end = self._position + len(view)
        self._buffer[self._position : end] = view
        self._position = end

    def fill_zero_to(self, index: int) -> None:
        if index < self._position or index > self._block_size:
            raise ValueError(
                f"Cannot zero-fill from {self._position} to {index} in a {self._block_size} byte block"
            )

        self._buffer[self._position : index] = bytes(index - self._position)
        self._position = index

    def flush(self) -> None:
        """Process the current block as-is. Not counted in `blocks_processed`."""
        self._process_block(self._buffer)
        self._position = 0
