"""
roster_parser

Employee roster ingestion: CSV/JSON parsing into companies, identity
matching, field-level merging and deduplication against a document store.
"""

__version__ = "0.1.0"
