"""Entry point: python -m swaggen

Reads a Swagger document, writes interfaces and a service module.
"""

from __future__ import annotations

from .cli import main

if __name__ == "__main__":
    main()
