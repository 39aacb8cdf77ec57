"""
Temple search engine.

Responsibilities:
- Derive facet options from the catalog.
- Score temples against a free-text query.
- Filter by region, tradition, environment and feature, then sort.
- Summarise the current result set as insights.
"""
