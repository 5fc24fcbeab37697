"""Read-only dashboard service for Laconic registry application records."""
