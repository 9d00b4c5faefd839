"""
Top-level entry point: python -m jwt_tool <subcommand>
"""

from .cli import main

if __name__ == "__main__":
    main()
