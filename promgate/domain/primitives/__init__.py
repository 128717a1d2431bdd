"""Static flag names and validation tables."""
