"""
Info CLI command

Shows basic information about a GOL file and whether it can be opened.
"""

import argparse
from pathlib import Path

from golquery.core.exceptions import OpenError
from golquery.store.handle import open_store


def run_info(args: argparse.Namespace) -> int:
    """Run the info command"""
    gol_path = Path(args.gol)

    if not gol_path.exists():
        print(f"Error: GOL file not found: {gol_path}")
        return 1

    print(f"File: {gol_path.resolve()}")
    print(f"Size: {gol_path.stat().st_size / (1024 * 1024):,.1f} MB")

    try:
        with open_store(gol_path) as store:
            print(f"Engine: {store.engine_name}")
            print("Status: OK")
    except OpenError as e:
        print(f"Status: Cannot open ({e})")
        return 1

    return 0
