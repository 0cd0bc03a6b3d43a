"""Code shared by the data service and the business service."""
