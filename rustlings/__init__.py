"""Runner for small Rust exercises: verify, run, hint, reset, list, lsp and watch."""

__version__ = "5.2.1"