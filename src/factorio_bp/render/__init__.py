"""
Render package: JSON and debug text output.
"""
from .output import OutputFormat, render_json, render_debug, render_output

__all__ = ["OutputFormat", "render_json", "render_debug", "render_output"]
