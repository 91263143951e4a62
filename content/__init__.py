"""content

Read-only reference tables (monsters, gambits, appeals, judges, stages).
"""
