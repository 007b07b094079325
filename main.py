#!/usr/bin/env python3
"""
Kernel CodeQL DB - CodeQL database creation for Linux kernel CVE analysis

Usage:
    python main.py 1 <fix-commit> CVE-2025-38245 /dbs 1 net/atm/mpoa.c CONFIG_ATM
    python main.py 2 <fix-commit> CVE-2025-38245 /dbs 2 net/atm
"""

from kernel_codeql_db.presentation.cli.app import main

if __name__ == '__main__':
    main()
