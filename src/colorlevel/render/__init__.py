from colorlevel.render.human import render_human, render_levels
from colorlevel.render.json import render_json

__all__ = ["render_human", "render_json", "render_levels"]
