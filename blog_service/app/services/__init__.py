"""
Service layer abstraction.

Services encapsulate the storage logic for a domain.  They speak in
terms of the Pydantic schemas and plain Python values, which keeps the
gRPC handlers free of MongoDB details and lets the storage be swapped
out in tests.
"""
