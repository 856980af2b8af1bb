"""Core building blocks of nslog."""
