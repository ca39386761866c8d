"""Console logging setup and structured error log."""
