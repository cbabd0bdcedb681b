"""
gridpaper - single-page graph paper PDFs typeset with LaTeX/TikZ

Architecture:
- Templating Context: render parameters, config resolution, LaTeX template population
- Rendering Context: workspace lifecycle, PDF compilation and output delivery
"""

__version__ = "0.1.0"
