"""Course platform backend."""
