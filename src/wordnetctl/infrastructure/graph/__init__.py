"""NetworkX analysis view over the built hypernym graph."""
