"""Product Service: CRUD HTTP API over a single products table."""
