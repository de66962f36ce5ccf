"""Domain logic: catalog and favorites."""
