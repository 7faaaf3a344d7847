"""HTTP API for the job board."""
