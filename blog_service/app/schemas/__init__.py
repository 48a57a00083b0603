"""
Pydantic schema definitions for blog payloads.

Schemas are separated from both the protobuf messages and the MongoDB
documents so that neither the wire format nor the storage layout leaks
into the service layer.
"""
