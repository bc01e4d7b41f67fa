"""Layout error taxonomy.

Both errors are programming errors: they mean a conversion ran before startup
configuration finished, or with the zero sentinel layout. They abort the
conversion instead of producing a corrupt coordinate.
"""


class LayoutError(RuntimeError):
    """Base class for world layout misuse."""


class UninitializedLayoutError(LayoutError):
    """A conversion needed the process-wide layout before it was set."""

    def __init__(self) -> None:
        super().__init__(
            "No world layout is set; call tile_world.set_layout() or pass layout="
        )


class DegenerateLayoutError(LayoutError):
    """A conversion was attempted with a zero layout dimension."""

    def __init__(self, dims: object, kind: str = "tile dimensions") -> None:
        super().__init__(f"Layout {kind} must be positive, got {dims}")
        self.dims = dims
