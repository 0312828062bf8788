"""API layer: the read surface a transport maps onto HTTP.

Key rules:

1. No SQLAlchemy imports - adapters own the store
2. No filtering or sorting here - the listing engine owns it
3. Only this layer turns unexpected exceptions into the generic error payload
"""
