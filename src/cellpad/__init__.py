"""Terminal text editor core: key translation and selection-aware rendering."""

__all__ = [
    "adapters",
    "buffer",
    "config",
    "input",
    "keymaps",
    "render",
    "runtime",
]

__version__ = "0.1.0"
