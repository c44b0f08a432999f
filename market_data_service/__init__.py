"""Market data service: cache-aside market snapshots over Redis and PostgreSQL."""
