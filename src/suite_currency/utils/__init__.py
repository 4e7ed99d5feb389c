"""Helper functions shared across the package."""
