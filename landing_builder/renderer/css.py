"""
Déclarations de style → CSS.

Les styles des éléments sont des dicts camelCase ({"fontSize": 32}) ;
les nombres reçoivent l'unité px sauf pour les propriétés sans unité.
"""
import re
from typing import Any, Dict

_UPPER = re.compile(r"([A-Z])")

_UNITLESS = {"fontWeight", "lineHeight", "opacity", "zIndex", "flex", "flexGrow", "flexShrink", "order"}

BASE_CSS = """*,*::before,*::after{box-sizing:border-box}
body{margin:0;font-family:-apple-system,BlinkMacSystemFont,"Segoe UI",Roboto,sans-serif;background:#f3f4f6}
.lb-canvas{background:#fff;margin:0 auto;position:relative}
.lb-element--editable:hover{outline:1px solid #60A5FA}
.lb-element img,.lb-element video,.lb-element iframe{max-width:100%}"""


def kebab(name: str) -> str:
    """backgroundColor → background-color"""
    return _UPPER.sub(lambda m: "-" + m.group(1).lower(), name)


def css_value(name: str, value: Any) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    if isinstance(value, (int, float)) and name not in _UNITLESS:
        return f"{value}px"
    return str(value)


def style_to_css(style: Dict[str, Any]) -> str:
    """{"fontSize": 32, "textAlign": "center"} → "font-size: 32px; text-align: center" """
    parts = []
    for name, value in style.items():
        if value is None or value == "":
            continue
        parts.append(f"{kebab(name)}: {css_value(name, value)}")
    return "; ".join(parts)
