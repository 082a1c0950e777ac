"""HTTP query service for the holiday calendar."""
