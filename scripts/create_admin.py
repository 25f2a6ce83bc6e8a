# scripts/create_admin.py
"""
Create the admin panel account.
Run this script once to create the initial admin account; pass --force to
reset the password of an existing one.
"""
import sys
from pathlib import Path

# Ensure UTF-8 capable stdout/stderr on Windows terminals
if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8")
    sys.stderr.reconfigure(encoding="utf-8")

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from warm_admin.cli import main

if __name__ == "__main__":
    sys.exit(main())
