"""Text of the entry currently being typed."""


class InputBuffer:
    """Accumulates characters until the entry is confirmed or discarded."""

    def __init__(self) -> None:
        self._chars: list[str] = []

    def append(self, char: str) -> None:
        self._chars.append(char)

    def delete_last(self) -> None:
        """Remove the last character. Does nothing when the buffer is empty."""
        if self._chars:
            self._chars.pop()

    def clear(self) -> None:
        self._chars.clear()

    def as_text(self) -> str:
        return "".join(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __repr__(self) -> str:
        return f"InputBuffer({self.as_text()!r})"
