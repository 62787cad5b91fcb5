"""Application layer: processing ports, results and use-cases."""
