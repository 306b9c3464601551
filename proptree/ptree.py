"""Hierarchical property tree with ordered, non-unique keyed children."""

from __future__ import annotations

import copy as _copy
from typing import Any, Callable, Iterable, Iterator, Optional, Tuple, Union

from .errors import PtreeBadData, PtreeBadPath
from .translator import translator_between

_MISSING = object()


class Path:
    """A sequence of keys separated by a single separator character."""

    def __init__(self, value: str = "", separator: str = ".") -> None:
        if len(separator) != 1:
            raise ValueError("separator must be a single character")
        self._value = value
        self._start = 0
        self.separator = separator

    def _copy(self) -> "Path":
        other = Path(self._value, self.separator)
        other._start = self._start
        return other

    def reduce(self) -> str:
        """Remove and return the first key of the remaining path."""
        if self.empty():
            raise ValueError("cannot reduce an empty path")
        end = self._value.find(self.separator, self._start)
        if end < 0:
            end = len(self._value)
        fragment = self._value[self._start:end]
        self._start = end
        if not self.empty():
            self._start += 1
        return fragment

    def empty(self) -> bool:
        """Whether no keys remain in the path."""
        return self._start >= len(self._value)

    def single(self) -> bool:
        """Whether exactly one key (no separator) remains in the path."""
        return self.separator not in self._value[self._start:]

    def dump(self) -> str:
        """The full text of the path."""
        return self._value

    def _coerce(self, other: Union["Path", str]) -> "Path":
        if isinstance(other, Path):
            return other
        if isinstance(other, str):
            return Path(other, self.separator)
        raise TypeError(f"cannot combine a path with {type(other).__name__}")

    def __itruediv__(self, other: Union["Path", str]) -> "Path":
        other = self._coerce(other)
        if not (
            other.separator == self.separator or other.empty() or other.single()
        ):
            raise ValueError("incompatible path separators")
        if not other.empty():
            joiner = "" if self.empty() else self.separator
            self._value = self._value + joiner + other._value[other._start:]
        return self

    def __truediv__(self, other: Union["Path", str]) -> "Path":
        result = self._copy()
        result /= other
        return result

    def __rtruediv__(self, other: str) -> "Path":
        result = Path(other, self.separator)
        result /= self
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return (
            self.separator == other.separator
            and self._value[self._start:] == other._value[other._start:]
        )

    def __hash__(self) -> int:
        return hash((self.separator, self._value[self._start:]))

    def __str__(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return f"Path({self._value!r}, {self.separator!r})"


PathLike = Union[Path, str]


def _to_path(path: PathLike) -> Path:
    if isinstance(path, Path):
        return path._copy()
    return Path(path)


def _type_name(type_: Any) -> str:
    return getattr(type_, "__name__", repr(type_))


class Ptree:
    """A node holding one piece of data and an ordered list of keyed children.

    Keys need not be unique. With ``ignore_case`` keys are compared
    without regard to letter case.
    """

    def __init__(self, data: Any = "", ignore_case: bool = False) -> None:
        self.data = data
        self.ignore_case = ignore_case
        self._children: list[Tuple[str, Ptree]] = []

    # --- copying -------------------------------------------------------

    def _clone(self, ignore_case: bool) -> "Ptree":
        node = Ptree(_copy.deepcopy(self.data), ignore_case)
        node._children = [(k, c._clone(ignore_case)) for k, c in self._children]
        return node

    def _adopt(self, child: Optional["Ptree"]) -> "Ptree":
        if child is None:
            return Ptree(ignore_case=self.ignore_case)
        return child._clone(self.ignore_case)

    def copy(self) -> "Ptree":
        """Return a deep copy of this tree."""
        return self._clone(self.ignore_case)

    def swap(self, other: "Ptree") -> None:
        """Exchange data and children with another tree."""
        self.data, other.data = other.data, self.data
        self._children, other._children = other._children, self._children

    # --- container view ------------------------------------------------

    def __len__(self) -> int:
        return len(self._children)

    def __iter__(self) -> Iterator[Tuple[str, "Ptree"]]:
        return iter(tuple(self._children))

    def __reversed__(self) -> Iterator[Tuple[str, "Ptree"]]:
        return reversed(tuple(self._children))

    def _norm(self, key: str) -> str:
        return key.lower() if self.ignore_case else key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Ptree):
            return NotImplemented
        if len(self._children) != len(other._children) or self.data != other.data:
            return False
        return all(
            self._norm(k1) == self._norm(k2) and c1 == c2
            for (k1, c1), (k2, c2) in zip(self._children, other._children)
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Ptree({self.data!r}, children={len(self._children)})"

    def empty(self) -> bool:
        """Whether this node has no children."""
        return not self._children

    def front(self) -> Tuple[str, "Ptree"]:
        """The first (key, child) pair."""
        return self._children[0]

    def back(self) -> Tuple[str, "Ptree"]:
        """The last (key, child) pair."""
        return self._children[-1]

    def insert(self, index: int, key: str, child: Optional["Ptree"] = None) -> "Ptree":
        """Insert a copy of ``child`` under ``key`` before ``index``; return it."""
        node = self._adopt(child)
        self._children.insert(index, (key, node))
        return node

    def extend(self, index: int, items: Iterable[Tuple[str, "Ptree"]]) -> None:
        """Insert copies of the (key, child) pairs before ``index``."""
        pairs = [(k, self._adopt(c)) for k, c in list(items)]
        self._children[index:index] = pairs

    def push_front(self, key: str, child: Optional["Ptree"] = None) -> "Ptree":
        return self.insert(0, key, child)

    def push_back(self, key: str, child: Optional["Ptree"] = None) -> "Ptree":
        return self.insert(len(self._children), key, child)

    def pop_front(self) -> Tuple[str, "Ptree"]:
        return self._children.pop(0)

    def pop_back(self) -> Tuple[str, "Ptree"]:
        return self._children.pop()

    def erase_at(self, start: int, stop: Optional[int] = None) -> int:
        """Remove the child at ``start``, or the children in ``start:stop``.

        Returns the index of the element that now follows the erased ones.
        """
        if stop is None:
            del self._children[start]
        else:
            del self._children[start:stop]
        return start

    def reverse(self) -> None:
        self._children.reverse()

    def sort(self, key: Optional[Callable[[Tuple[str, "Ptree"]], Any]] = None) -> None:
        """Stable-sort children by ``key(pair)``, or by key order if not given."""
        if key is None:
            self._children.sort(key=lambda item: self._norm(item[0]))
        else:
            self._children.sort(key=key)

    # --- associative view ---------------------------------------------

    def ordered(self) -> list[Tuple[str, "Ptree"]]:
        """The (key, child) pairs in key order."""
        return sorted(self._children, key=lambda item: self._norm(item[0]))

    def _index(self, key: str) -> Optional[int]:
        wanted = self._norm(key)
        for index, (k, _) in enumerate(self._children):
            if self._norm(k) == wanted:
                return index
        return None

    def find(self, key: str) -> Optional["Ptree"]:
        """A child with the given key, or None."""
        index = self._index(key)
        return None if index is None else self._children[index][1]

    def index_of(self, key: str) -> int:
        """Position of the child that ``find`` returns; KeyError if none."""
        index = self._index(key)
        if index is None:
            raise KeyError(key)
        return index

    def equal_range(self, key: str) -> list[Tuple[str, "Ptree"]]:
        wanted = self._norm(key)
        return [(k, c) for k, c in self._children if self._norm(k) == wanted]

    def count(self, key: str) -> int:
        return len(self.equal_range(key))

    def erase(self, key: str) -> int:
        """Remove all children with the given key; return how many."""
        wanted = self._norm(key)
        kept = [(k, c) for k, c in self._children if self._norm(k) != wanted]
        removed = len(self._children) - len(kept)
        self._children = kept
        return removed

    def clear(self) -> None:
        """Remove both the data and all children."""
        self.data = ""
        self._children = []

    # --- property tree view --------------------------------------------

    def _walk(self, path: PathLike) -> Optional["Ptree"]:
        p = _to_path(path)
        node: Optional[Ptree] = self
        while node is not None and not p.empty():
            node = node.find(p.reduce())
        return node

    def _force(self, p: Path) -> "Ptree":
        if p.empty():
            raise ValueError("empty path not allowed")
        node = self
        while not p.single():
            fragment = p.reduce()
            child = node.find(fragment)
            if child is None:
                child = Ptree(ignore_case=node.ignore_case)
                node._children.append((fragment, child))
            node = child
        return node

    def get_child(self, path: PathLike, default: Any = _MISSING) -> Any:
        """The node at ``path``; ``default`` or PtreeBadPath if missing."""
        node = self._walk(path)
        if node is not None:
            return node
        if default is _MISSING:
            raise PtreeBadPath("No such node", _to_path(path))
        return default

    def get_child_optional(self, path: PathLike) -> Optional["Ptree"]:
        return self._walk(path)

    def put_child(self, path: PathLike, value: "Ptree") -> "Ptree":
        """Set the node at ``path`` to a copy of ``value``, replacing it if present."""
        p = _to_path(path)
        parent = self._force(p)
        fragment = p.reduce()
        new = parent._adopt(value)
        existing = parent.find(fragment)
        if existing is not None:
            existing.data = new.data
            existing._children = new._children
            return existing
        parent._children.append((fragment, new))
        return new

    def add_child(self, path: PathLike, value: "Ptree") -> "Ptree":
        """Add a copy of ``value`` at ``path``, beside any existing same-key node."""
        p = _to_path(path)
        parent = self._force(p)
        fragment = p.reduce()
        return parent.push_back(fragment, value)

    def _get_translator(self, type_: Any, translator: Any) -> Any:
        if translator is not None:
            return translator
        internal = str if isinstance(self.data, str) else object
        return translator_between(internal, type_)

    def get_value(self, type_: Any = None, default: Any = _MISSING,
                  translator: Any = None) -> Any:
        """The data translated to ``type_``; ``default`` or PtreeBadData on failure."""
        if type_ is None:
            type_ = str if default is _MISSING or default is None else type(default)
        result = self._get_translator(type_, translator).get_value(self.data)
        if result is not None:
            return result
        if default is _MISSING:
            raise PtreeBadData(
                f'conversion of data to type "{_type_name(type_)}" failed', self.data
            )
        return default

    def get_value_optional(self, type_: Any = str, translator: Any = None) -> Any:
        return self._get_translator(type_, translator).get_value(self.data)

    def put_value(self, value: Any, translator: Any = None) -> None:
        """Replace the data with ``value`` translated to the stored form."""
        if translator is None:
            translator = translator_between(str, type(value))
        data = translator.put_value(value)
        if data is None:
            raise PtreeBadData(
                f'conversion of type "{_type_name(type(value))}" to data failed', None
            )
        self.data = data

    def get(self, path: PathLike, type_: Any = None, default: Any = _MISSING,
            translator: Any = None) -> Any:
        """Value at ``path``; with ``default``, missing or bad values yield it."""
        if default is _MISSING:
            return self.get_child(path).get_value(type_, translator=translator)
        node = self._walk(path)
        if node is None:
            return default
        return node.get_value(type_, default, translator)

    def get_optional(self, path: PathLike, type_: Any = str,
                     translator: Any = None) -> Any:
        node = self._walk(path)
        if node is None:
            return None
        return node.get_value_optional(type_, translator)

    def put(self, path: PathLike, value: Any, translator: Any = None) -> "Ptree":
        """Set the value at ``path``, creating missing nodes; return that node."""
        node = self._walk(path)
        if node is None:
            node = self.put_child(path, Ptree(ignore_case=self.ignore_case))
        node.put_value(value, translator)
        return node

    def add(self, path: PathLike, value: Any, translator: Any = None) -> "Ptree":
        """Add a new node at ``path`` holding ``value``; return it."""
        node = self.add_child(path, Ptree(ignore_case=self.ignore_case))
        node.put_value(value, translator)
        return node