from .text import format_event, render

__all__ = ["format_event", "render"]
