#!/usr/bin/env python3
"""Launch the coverage demo service.

Usage:
    ./start_server.py              # Start on 127.0.0.1:3000
    ./start_server.py --port 8080  # Use custom port
"""

from coverage_demo.launcher import main


if __name__ == "__main__":
    main()
