"""Host-facing adapters: logging setup and the local filesystem."""
