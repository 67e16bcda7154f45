"""Base classes shared across packages."""
