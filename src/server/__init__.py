"""HTTP API for adoc2sections."""
