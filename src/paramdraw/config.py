"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: Screen resolution, default canvas size and drawing styles live
   in one place instead of being scattered through model and view code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (shape icons) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    ICONS_PATH (str): Absolute path to the shape selector icons.
    DPI (int): Screen pixels per drawing unit (inch).
"""
import sys
import os
from pathlib import Path


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/paramdraw/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
ICONS_PATH: str = os.path.join(ASSETS_PATH, "icons")

# Units
DPI: int = 96  # screen pixels per inch
DEFAULT_CANVAS_WIDTH: float = 6.0  # inches
DEFAULT_CANVAS_HEIGHT: float = 4.0  # inches
MIN_CANVAS_SIZE: float = 1.0  # inches

# Drawing style (drawing units)
STROKE_WIDTH: float = 0.04
CROSSHAIR_HALF_SIZE: float = 0.05
HIT_TOLERANCE: float = 0.05
SELECTED_COLOR: str = "purple"
UNSELECTED_COLOR: str = "grey"
ARC_SEGMENTS: int = 16  # polyline points per quarter arc
CIRCLE_SEGMENTS: int = 96

# Parameter inputs
PARAM_STEP: float = 0.01

# Export
EXPORT_FILENAME: str = "drawing.svg"
EXPORT_MIME_TYPE: str = "image/svg+xml"
