"""
Input/Output Manager (SVG)
Handles exporting the CanvasState to a standalone SVG document.

Only finished geometry is written: selection highlighting and anchor
crosshairs exist purely for editing and never reach the exported file.
"""
import logging
import os
import xml.etree.ElementTree as ET

from paramdraw.config import EXPORT_FILENAME, STROKE_WIDTH, UNSELECTED_COLOR
from paramdraw.model.geometry import render_instance
from paramdraw.model.geometry_primitives import CircleGeometry, Geometry
from paramdraw.model.state import CanvasState
from paramdraw.utils import format_number

# Get module logger
logger = logging.getLogger(__name__)

SVG_NAMESPACE = "http://www.w3.org/2000/svg"


class IOManager:

    @staticmethod
    def build_svg(state: CanvasState) -> str:
        """
        Serialize the canvas into SVG markup.

        The output depends only on the state, so two calls without an
        intervening edit return identical text.
        """
        w = format_number(state.width)
        h = format_number(state.height)
        root = ET.Element("svg", {
            "xmlns": SVG_NAMESPACE,
            "width": f"{w}in",
            "height": f"{h}in",
            "viewBox": f"0 0 {w} {h}",
        })

        for shape in state.shapes:
            group = ET.SubElement(root, "g", {
                "stroke": UNSELECTED_COLOR,
                "stroke-width": format_number(STROKE_WIDTH),
                "fill": "none",
            })
            IOManager._append_geometry(group, render_instance(shape))

        ET.indent(root)
        return ET.tostring(root, encoding="unicode", xml_declaration=False) + "\n"

    @staticmethod
    def export_svg(state: CanvasState, directory: str) -> str:
        """Write the drawing into `directory` and return the file path."""
        filepath = os.path.join(directory, EXPORT_FILENAME)
        logger.info(f"Exporting {state.shape_count} shapes to: {filepath}")
        markup = IOManager.build_svg(state)
        try:
            with open(filepath, "w", encoding="utf-8") as f:
                f.write(markup)
        except OSError as e:
            logger.exception(f"Failed to export drawing: {e}")
            raise e
        logger.info(f"Export complete ({len(markup)} bytes).")
        return filepath

    @staticmethod
    def _append_geometry(parent: ET.Element, geometry: Geometry) -> None:
        if isinstance(geometry, CircleGeometry):
            ET.SubElement(parent, "circle", {
                "cx": format_number(geometry.center.x),
                "cy": format_number(geometry.center.y),
                "r": format_number(geometry.radius),
            })
        else:
            ET.SubElement(parent, "path", {"d": geometry.to_svg_path_data()})
