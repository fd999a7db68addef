class DrumMapError(Exception):
    """Base class for drum map conversion failures."""


class OrderMismatchError(DrumMapError, ValueError):
    """Explicit order did not cover every note entry exactly once."""

    def __init__(self, order_len: int, entry_len: int):
        self.order_len = order_len
        self.entry_len = entry_len
        super().__init__(
            f"explicit order lists {order_len} known notes but the map has {entry_len} entries"
        )
