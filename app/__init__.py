"""Performance Score service: scoring engine, report services and HTTP API."""
