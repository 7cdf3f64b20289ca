"""Run with: python -m bodycomposition"""
import sys

from bodycomposition.app.main import main

if __name__ == "__main__":
    sys.exit(main())
