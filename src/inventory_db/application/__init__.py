"""Application layer – dialect-free pagination and search primitives."""
