"""lite-shell: a small interactive shell with built-ins and PATH lookup."""

__version__ = "0.1.0"
