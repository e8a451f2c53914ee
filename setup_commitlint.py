#!/usr/bin/env python3
"""
commitlint setup — install commitlint and a global Git commit-msg hook.
Entry point script.
"""
import sys
import os

# Add 'src' to sys.path so we can import the package
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "src"))

from commitlint_setup.main import main

if __name__ == "__main__":
    main()
