"""gtin-merge: consolidate vendor CSV exports into one file of products with a GTIN/EAN."""

__version__ = "0.1.0"
