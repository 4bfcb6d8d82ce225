"""PyQt6 desktop interface for Dictionary Plus."""
