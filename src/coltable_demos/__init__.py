"""Demo programs that drive the coltable API."""
