"""
Search analytics.

Responsibilities:
- Record one event per search served by the API.
- Aggregate recorded events into usage statistics.
"""
