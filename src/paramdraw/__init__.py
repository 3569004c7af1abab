"""paramdraw - parametric vector drawing canvas with SVG export."""
