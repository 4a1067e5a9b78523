"""Static reference tables and their loader."""
