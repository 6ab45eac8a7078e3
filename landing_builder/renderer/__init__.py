from .css import style_to_css
from .dispatch import canvas_width, render_canvas, render_element
from .html import render_page, to_html

__all__ = ["style_to_css", "canvas_width", "render_canvas", "render_element", "render_page", "to_html"]
