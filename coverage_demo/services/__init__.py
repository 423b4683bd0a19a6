"""
Service layer for business logic.

This layer keeps the arithmetic and greeting operations apart from HTTP
request handling, so they can be tested and reused without a server.
"""
