#!/usr/bin/env python3
"""
Standalone entry point script for the running-total calculator.
This can be used when the package isn't installed.
"""

import sys
import os

# Add the src directory to Python path so we can import our modules
project_root = os.path.dirname(__file__)
sys.path.insert(0, os.path.join(project_root, "src"))

from running_total.cli import main

if __name__ == "__main__":
    sys.exit(main())
