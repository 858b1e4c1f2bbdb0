"""Core scan, extract and normalize stages."""
