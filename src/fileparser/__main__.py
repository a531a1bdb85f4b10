"""
File Parser - Comment-stripping batch splitter CLI

Usage:
    python -m fileparser                          # Show help
    python -m fileparser parse deploy.sql         # Print batches
    python -m fileparser parse app.conf --json    # Batches as JSON
    python -m fileparser types                    # Registered extensions
"""
from fileparser.cli.manage import app

if __name__ == "__main__":
    app()
