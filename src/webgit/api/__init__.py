"""HTTP API for WebGit."""
