"""Workflow marketplace components.

- a fixed, in-memory workflow catalog
- search, category filtering and statistics over it
- rich-based rendering and prompts
- the interactive menu loop and its CLI entrypoint
"""
