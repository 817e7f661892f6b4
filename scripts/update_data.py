#!/usr/bin/env python3
"""
Data Update Script for the Lotto 6/45 Generator

Fetches newly published draws and appends them to the local store.
Intended for a scheduled job after each Saturday draw, or manual runs via:
    python scripts/update_data.py
"""
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import requests

from lottogen.scraper import update_draws


def main():
    try:
        summary = update_draws()
    except (requests.RequestException, ValueError, KeyError) as e:
        print(f"[Update] Failed: {e}")
        return 1
    print(f"Done. added={summary['added']}, total={summary['total']}, latest={summary['latest']}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
