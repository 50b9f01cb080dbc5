"""
Development launcher.

Runs the viewer straight from a source checkout: `src/` is put on sys.path
so `import mathcanvas` works without `pip install -e .`.

Usage:
    $ python run.py
"""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(os.path.abspath(__file__)), "src"))

# Own taskbar icon group on Windows
if sys.platform == "win32":
    import ctypes
    ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID("mathcanvas.viewer")

from mathcanvas.app.main import main  # noqa: E402

if __name__ == "__main__":
    sys.exit(main())
