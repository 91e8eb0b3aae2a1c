#!/usr/bin/env python3
"""
Satellite Console Entry Point
Delegates to the CLI interface.
"""
import os
import sys

# Make the src/ layout importable without installation
sys.path.append(os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

from satellite_console.cli import app  # noqa: E402

if __name__ == "__main__":
    # Typer requires a command; running the script bare starts a session.
    if len(sys.argv) == 1:
        sys.argv.append("run")

    app()
