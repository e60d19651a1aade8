#!/usr/bin/env python
"""
Helper script to build and verify the package.
"""
import glob
import os
import shutil
import subprocess
import sys


def main():
    """Build and verify the package."""
    print("Building package...")

    # Clean previous builds
    for pattern in ["build", "dist", "*.egg-info"]:
        for path in glob.glob(pattern):
            print(f"Cleaning {path}...")
            if os.path.isdir(path):
                shutil.rmtree(path)

    try:
        subprocess.check_call(
            [sys.executable, "-m", "build", "--wheel", "--sdist"], cwd=os.getcwd()
        )
    except subprocess.CalledProcessError as e:
        print(f"\n✗ Build failed: {e}")
        sys.exit(1)

    print("\n✓ Package built successfully!")
    print("\nTo install locally:")
    print("  pip install dist/mvault_client-*.whl")
    print("\nOr in development mode:")
    print("  pip install -e .[test]")


if __name__ == "__main__":
    main()
