"""Services for the certificates module."""
