"""engine

Headless evaluation: config -> stat chain -> scores -> report/export.
"""
