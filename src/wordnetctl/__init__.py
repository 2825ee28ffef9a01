"""wordnetctl — shortest common ancestor queries over a WordNet hypernym graph."""

__version__ = "0.1.0"
