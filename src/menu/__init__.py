"""Console presentation for the address book."""
