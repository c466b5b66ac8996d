"""Services for shep."""
