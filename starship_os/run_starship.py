#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Starship OS Launcher

Runs the ship computer demonstration with the package imports resolved:

    python -m starship_os.run_starship --requests 15
"""

import sys

if __name__ == "__main__":
    try:
        from .src.main import main
        sys.exit(main())
    except ImportError as e:
        import traceback
        print(f"Caught ImportError: {e}", file=sys.stderr)
        print("--- Traceback ---", file=sys.stderr)
        traceback.print_exc(file=sys.stderr)
        print("-----------------", file=sys.stderr)
        print("Please check imports and ensure all dependencies are installed ('pip install -e .').", file=sys.stderr)
        sys.exit(1)
