#!/usr/bin/env python3
"""
Launch the Moody Plate CLI
Usage:
    python run_cli.py analyze -d ./measurements
    python run_cli.py check -d ./measurements
"""
import sys

from moody_plate.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
