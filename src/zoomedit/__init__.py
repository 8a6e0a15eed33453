"""A modal terminal text editor with a zoomable viewport."""

__all__ = [
    "actions",
    "adapters",
    "application",
    "buffer",
    "keymaps",
    "modes",
    "render",
    "runtime",
]

__version__ = "0.1.0"
