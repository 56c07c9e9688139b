"""REST connectors for Resource Manager services."""
