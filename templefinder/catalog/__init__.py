"""
Static temple catalog.

Responsibilities:
- Define the canonical Temple schema.
- Load the bundled temple dataset once per process.
- Validate catalog integrity at load time.
"""
