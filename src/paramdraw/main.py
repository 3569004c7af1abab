"""
Application Initialization
==========================
This module constructs the MVC (Model-View-Controller) architecture and starts
the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Reads the command line (log level, log file, initial canvas size).
2. Instantiates the Global Data Model (CanvasState).
3. Instantiates the Main Window (View), which builds the controllers.
4. Passes the Model into the View so they can communicate.
"""
import argparse
import logging
import math
import sys
from typing import Optional, Sequence
from PySide6.QtWidgets import QApplication

from paramdraw.config import DEFAULT_CANVAS_WIDTH, DEFAULT_CANVAS_HEIGHT, MIN_CANVAS_SIZE
from paramdraw.logging_config import setup_logging
from paramdraw.model.state import CanvasState
from paramdraw.view.main_window import MainWindow, VISIBLE_APP_NAME


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="paramdraw", description="Parametric vector drawing canvas.")
    parser.add_argument("--debug", action="store_true", help="log every pointer and field event")
    parser.add_argument("--log-file", default=None, help="also write the log to this file")
    parser.add_argument("--width", type=float, default=DEFAULT_CANVAS_WIDTH, help="canvas width in inches")
    parser.add_argument("--height", type=float, default=DEFAULT_CANVAS_HEIGHT, help="canvas height in inches")
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if not all(math.isfinite(v) and v >= MIN_CANVAS_SIZE for v in (args.width, args.height)):
        parser.error(f"canvas width and height must be at least {MIN_CANVAS_SIZE:g} in")
    return args


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = parse_args(argv)

    # 1. Setup Logging (Console + Optional File)
    setup_logging(level=logging.DEBUG if args.debug else logging.INFO, log_file=args.log_file)

    # 2. Create the Qt Application
    app = QApplication(sys.argv[:1])
    app.setApplicationName(VISIBLE_APP_NAME)

    # 3. Initialize the Data Model
    canvas = CanvasState(width=args.width, height=args.height)

    # 4. Initialize the Main Window, passing the model
    window = MainWindow(canvas)
    window.show()

    # 5. Start Event Loop
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
