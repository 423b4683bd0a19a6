"""Coverage Demo Service.

A small HTTP service exposing:
- Sum and product of two integers
- Parity check for a single integer
- Time-of-day aware greetings
- Static application information

Usage:
    ./start_server.py  # From repo root
"""

from .server import app

__all__ = ['app']
