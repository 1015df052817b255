from html2wf.cascade.engine import CascadeEngine

__all__ = ["CascadeEngine"]
