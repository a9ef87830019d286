"""
Property catalog package.

Responsibilities:
- Define the immutable Property record and filter criteria.
- Load and validate the static listing catalog.
- Answer read-only search and facet queries over it.
"""
