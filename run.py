"""
Development runner
==================
Starts ParamDraw straight from a source checkout, without installing it.

Usage:
    $ python run.py [--debug] [--log-file app.log] [--width 6] [--height 4]
"""
import os
import sys

SRC_DIR: str = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'src')


def _set_windows_app_id(app_id: str) -> None:
    """Give the window its own taskbar entry on Windows; no-op elsewhere."""
    try:
        import ctypes
        ctypes.windll.shell32.SetCurrentProcessExplicitAppUserModelID(app_id)
    except (AttributeError, ImportError):
        pass


if __name__ == "__main__":
    sys.path.insert(0, SRC_DIR)
    _set_windows_app_id('paramdraw.ParamDraw')

    from paramdraw.main import main
    main()
