"""Widgets that render into a cell buffer: blocks, bar charts and canvases."""