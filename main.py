#!/usr/bin/env python3
"""Thin wrapper: run gitporcelain CLI. Usage: python main.py <cmd> ... (same as the gitporcelain script)."""

import sys

if __name__ == "__main__":
    from gitporcelain.cli import main
    sys.exit(main())
