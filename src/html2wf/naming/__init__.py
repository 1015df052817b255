from html2wf.naming.registry import DEFAULT_PREFIX, ClassRegistry
from html2wf.naming.rewriter import SelectorRewriter

__all__ = ["DEFAULT_PREFIX", "ClassRegistry", "SelectorRewriter"]
