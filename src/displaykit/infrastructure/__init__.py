"""Infrastructure: filesystem and import-system access."""
