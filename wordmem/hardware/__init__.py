"""Hardware models for WordMem."""
