"""Application workflows wrapping the pure inventory parser."""
