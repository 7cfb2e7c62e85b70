"""caseboard - a Kanban board for organizing cases into columns."""

__version__ = "0.1.0"
