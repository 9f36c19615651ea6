#!/usr/bin/env python3
"""
Environment bootstrap for screenshot-capture.
Installs the package with its dependencies and the Chromium browser Playwright drives.
"""

import shlex
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def run_command(cmd, description):
    """Run one bootstrap step, echoing the command and its outcome."""
    print(f"\n📦 [screenshot-capture] {description}")
    print(f"   $ {shlex.join(cmd)}")
    try:
        result = subprocess.run(cmd, capture_output=True, text=True)
    except OSError as e:
        print(f"❌ Could not start {cmd[0]}: {e}")
        return False

    if result.returncode != 0:
        print(f"❌ {description} failed (exit code {result.returncode})")
        if result.stderr:
            print(result.stderr)
        return False

    print(f"✅ {description} done")
    return True


def bootstrap_steps(python=sys.executable, project_root=PROJECT_ROOT):
    return [
        ([python, "-m", "pip", "install", "-e", str(project_root)], "Installing screenshot-capture"),
        ([python, "-m", "playwright", "install", "chromium"], "Installing Chromium browser"),
    ]


def main():
    print("🚀 Setting up screenshot-capture...")

    if sys.version_info < (3, 8):
        print("❌ Python 3.8+ required")
        sys.exit(1)

    for cmd, description in bootstrap_steps():
        if not run_command(cmd, description):
            sys.exit(1)

    print("\n✅ Setup complete! You can now run:")
    print("   screenshot-capture https://example.com desktop --production")


if __name__ == "__main__":
    main()
