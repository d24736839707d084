"""Runtime and syntax types for RScheme."""
