"""Rendering layer.

Altair charts and Plotly maps built from Gold tables, written as
standalone HTML files.
"""
