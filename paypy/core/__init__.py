"""Core building blocks of paypy."""
