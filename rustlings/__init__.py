"""A runner that compiles, tests and tracks small Rust exercises, with worked solutions."""

__version__ = "5.6.1"