#!/usr/bin/env python3
"""
Backward-compatible entry point.

Usage:
    python3 jwt-tool.py decode <token>
    python3 jwt-tool.py encode --payload '{"sub": "42"}' --secret s3cret

This shim delegates to the jwt_tool package.
"""

import os
import sys

# Ensure the src/ directory is on the Python path so the package can be found
sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from jwt_tool.cli import main

if __name__ == "__main__":
    main()
