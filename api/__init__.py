"""HTTP interface of the order service."""
