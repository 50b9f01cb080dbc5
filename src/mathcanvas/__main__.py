"""
Run with: python -m mathcanvas
"""
import sys

from mathcanvas.app.main import main

if __name__ == "__main__":
    sys.exit(main())
