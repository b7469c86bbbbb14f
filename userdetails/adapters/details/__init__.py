"""Details checker adapters for resolving usernames to status codes."""
