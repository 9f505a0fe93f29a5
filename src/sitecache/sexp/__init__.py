"""Generic s-expression notation used to persist the cache."""

from .reader import from_string
from .tree import Atom, Node, Sexp, atom, node, to_string

__all__ = ["Atom", "Node", "Sexp", "atom", "from_string", "node", "to_string"]
