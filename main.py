#!/usr/bin/env python3
"""
Cloudflare Records - Main Entry Point

This is the main entry point for the Cloudflare Records CLI.
It can be run directly or imported as a module.
"""

from cloudflare_records.cli.main import main

if __name__ == "__main__":
    main()
