"""HTTP router package."""
