"""
GraphQL schema changelog builder.

Compares the published GraphQL schema with the current one and records the
notable differences as a dated changelog entry, grouping changes that belong
to schema previews separately.
"""

__version__ = "0.1.0"
