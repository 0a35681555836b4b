"""
Address counter for hex dump lines.
"""


class LineCounter:
    """Simple counter advancing by a fixed step size."""

    def __init__(self, step: int = 16):
        """
        Initialize LineCounter.

        Args:
            step: How much to add on each increment
        """
        self.count = 0
        self.step = step

    def increment(self):
        """Advance the counter by one step."""
        self.count += self.step

    def __int__(self) -> int:
        return self.count

    def __index__(self) -> int:
        return self.count

    def __format__(self, format_spec: str) -> str:
        return format(self.count, format_spec)

    def __repr__(self) -> str:
        return f"LineCounter(count={self.count}, step={self.step})"
