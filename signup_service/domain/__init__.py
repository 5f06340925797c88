"""Domain layer: account models and use-case contracts."""
