"""Binary trees with parent links, tree metrics and text rendering."""

__version__ = "0.1.0"
__all__ = ["node", "metrics", "render"]