"""WebGit: a local web gateway for a single git repository."""

__version__ = "0.1.0"
