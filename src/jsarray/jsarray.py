from __future__ import annotations

import inspect
import logging
import warnings
from functools import cmp_to_key
from operator import index as op_index
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

if TYPE_CHECKING:
    import sys
    from collections.abc import Callable, Iterable, Iterator
    from typing import SupportsIndex

    from _typeshed import SupportsRichComparison

    if sys.version_info < (3, 11):
        from typing_extensions import Self
    else:
        from typing import Self

T = TypeVar("T")

logger = logging.getLogger(__name__)

DEFAULT_SEPARATOR = ","


def _normalize_index(index: SupportsIndex, length: int) -> int:
    """Resolve a possibly negative index against length, clamped to [0, length]."""
    idx = op_index(index)
    return max(0, length + idx) if idx < 0 else min(idx, length)


def _same_value(a: object, b: object) -> bool:
    return a is b or a == b


def _positional_arity(fn: Callable[..., Any]) -> int | None:
    """Count the positional parameters fn accepts.

    Returns:
        Number of positional parameters, None if fn takes ``*args``,
        or -1 if the signature cannot be inspected.
    """
    try:
        signature = inspect.signature(fn)
    except (TypeError, ValueError):
        return -1

    count = 0
    for param in signature.parameters.values():
        if param.kind is param.VAR_POSITIONAL:
            return None
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
            count += 1
    return count


def _bind_callback(fn: Callable[..., Any], full: int, fallback: int) -> Callable[..., Any]:
    """Wrap fn so it only receives as many leading arguments as it declares.

    Args:
        fn: User callback
        full: Number of arguments the caller passes
        fallback: Number of arguments to pass when fn has no inspectable signature
    """
    arity = _positional_arity(fn)
    if arity == -1:
        arity = fallback
    if arity is None or arity >= full:
        return fn

    def call(*args: Any) -> Any:
        return fn(*args[:arity])

    return call


class jsarray(Generic[T]):  # noqa: N801
    """An ordered collection with the operations of a JavaScript Array."""

    _items: list[T]

    def __init__(
        self,
        data: Iterable[T] | None = None,
        size: SupportsIndex | None = None,
        default: T | None = None,
    ) -> None:
        """Initialize a jsarray from data.

        Args:
            data: Initial elements (optional, defaults to empty)
            size: Pre-sized length (optional). Positions not covered by data
                  are filled with default.
            default: Value used to pad up to size (default: None)

        Raises:
            TypeError: If size doesn't support __index__
            ValueError: If size is negative or smaller than data
        """
        if size is not None:
            try:
                size = op_index(size)
            except TypeError:
                raise TypeError("size must support __index__") from None
            if size < 0:
                raise ValueError("size must be non-negative")

        # Copy to avoid aliasing caller storage
        self._items = [] if data is None else list(data)

        if size is not None:
            if len(self._items) > size:
                raise ValueError("size must accommodate all data")
            self._items.extend([default] * (size - len(self._items)))  # type: ignore[list-item]

    @classmethod
    def of(cls, *items: T) -> jsarray[T]:
        """Create a jsarray from its arguments."""
        return cls(items)

    @property
    def length(self) -> int:
        """The current number of elements."""
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def _check_index(self, key: SupportsIndex, message: str) -> int:
        idx = op_index(key)
        if not 0 <= idx < len(self._items):
            raise IndexError(message)
        return idx

    @overload
    def __getitem__(self, key: SupportsIndex) -> T: ...

    @overload
    def __getitem__(self, key: slice) -> jsarray[T]: ...

    def __getitem__(self, key: SupportsIndex | slice) -> T | jsarray[T]:
        """Get an element by index, or a new jsarray for a slice object.

        Integer indices are not normalized: negative values raise like any
        other out-of-range index. Use :meth:`at` for negative lookups.

        Raises:
            TypeError: If key is not an integer or slice
            IndexError: If index is out of range
        """
        if isinstance(key, slice):
            return jsarray(self._items[key])
        return self._items[self._check_index(key, "jsarray index out of range")]

    @overload
    def __setitem__(self, key: SupportsIndex, value: T) -> None: ...

    @overload
    def __setitem__(self, key: slice, value: Iterable[T]) -> None: ...

    def __setitem__(self, key: SupportsIndex | slice, value: T | Iterable[T]) -> None:
        """Set an element by index, or replace a region for a slice object.

        Raises:
            TypeError: If key/value type combination is invalid
            IndexError: If index is out of range
            ValueError: If extended slice length mismatches
        """
        if isinstance(key, slice):
            try:
                values = list(value)  # type: ignore[arg-type]
            except TypeError:
                raise TypeError("can only assign an iterable") from None
            self._items[key] = values
            return
        self._items[self._check_index(key, "jsarray assignment index out of range")] = value  # type: ignore[assignment]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._items)

    def __contains__(self, value: object) -> bool:
        return self.includes(value)  # type: ignore[arg-type]

    def __eq__(self, other: object) -> bool:
        """Return True if other is an iterable with equal elements in the same order."""
        if self is other:
            return True

        if isinstance(other, jsarray):
            return self._items == other._items

        if not hasattr(other, "__iter__"):
            return NotImplemented

        # Try to get length first for early exit
        if hasattr(other, "__len__"):
            try:
                if len(self._items) != len(other):  # type: ignore[arg-type]
                    return False
            except TypeError:
                pass  # Some iterables don't support len()

        other_iter = iter(other)  # type: ignore[call-overload]
        for value in self._items:
            try:
                other_val = next(other_iter)
            except StopIteration:
                return False
            if not _same_value(value, other_val):
                return False

        try:
            next(other_iter)
            return False
        except StopIteration:
            return True

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return NotImplemented
        return not result

    def __hash__(self) -> None:  # type: ignore[override]
        """Raise TypeError as jsarrays are mutable."""
        raise TypeError("unhashable type: 'jsarray'")

    def __add__(self, other: Iterable[Any]) -> jsarray[Any]:
        """Return a new jsarray with the elements of other appended."""
        result: jsarray[Any] = jsarray(self._items)
        result.add_range(other)
        return result

    def __iadd__(self, other: Iterable[Any]) -> Self:
        self.add_range(other)
        return self

    def __copy__(self) -> jsarray[T]:
        return jsarray(self._items)

    def __repr__(self) -> str:
        return f"jsarray({self._items!r})"

    def __str__(self) -> str:
        return self.join()

    def _snapshot(self) -> Iterator[tuple[int, T]]:
        """Yield (index, value) pairs up to the length at call time.

        Indices that disappear because a callback shrank the array are skipped.
        """
        length = len(self._items)
        for index in range(length):
            if index >= len(self._items):
                return
            yield index, self._items[index]

    # ---------------------------------------------------------------
    # Basic access and mutation
    # ---------------------------------------------------------------

    def at(self, index: SupportsIndex) -> T | None:
        """Return the element at index, counting back from the end if negative.

        Returns:
            The element, or None if index is out of range
        """
        idx = op_index(index)
        if idx < 0:
            idx += len(self._items)
        if not 0 <= idx < len(self._items):
            return None
        return self._items[idx]

    def push(self, *items: T) -> int:
        """Append items and return the new length."""
        self._items.extend(items)
        return len(self._items)

    def pop(self) -> T | None:
        """Remove and return the last element, or None if empty."""
        if self._items:
            return self._items.pop()
        return None

    def shift(self) -> T | None:
        """Remove and return the first element, or None if empty."""
        if self._items:
            return self._items.pop(0)
        return None

    def unshift(self, *items: T) -> int:
        """Insert items at the start, in argument order, and return the new length."""
        self._items[0:0] = items
        return len(self._items)

    def insert(self, index: SupportsIndex, item: T) -> None:
        """Same as ``splice(index, 0, item)``."""
        self.splice(index, 0, item)

    def insert_range(self, index: SupportsIndex, items: Iterable[T]) -> None:
        """Same as ``splice(index, 0, *items)``."""
        self.splice(index, 0, *items)

    def add(self, item: T) -> None:
        self._items.append(item)

    def add_range(self, items: Iterable[T]) -> None:
        # Read from the store directly so extending with self terminates
        if isinstance(items, jsarray):
            self._items.extend(items._items)
        else:
            self._items.extend(items)

    def clear(self) -> None:
        self._items.clear()

    def remove(self, item: T) -> bool:
        """Remove the first element equal to item.

        Returns:
            True if an element was removed, False otherwise
        """
        for idx, value in enumerate(self._items):
            if _same_value(value, item):
                del self._items[idx]
                return True
        return False

    def remove_at(self, index: SupportsIndex) -> T:
        """Remove and return the element at index.

        Raises:
            IndexError: If index is out of range
        """
        return self._items.pop(self._check_index(index, "remove index out of range"))

    def copy(self) -> jsarray[T]:
        """Return a shallow copy."""
        return self.__copy__()

    def to_list(self) -> list[T]:
        """Return the elements as a new Python list."""
        return list(self._items)

    def to_locale_string(self) -> str:
        """Deprecated alias of ``str(arr)``."""
        warnings.warn("to_locale_string() is deprecated, use str() instead", DeprecationWarning, stacklevel=2)
        return str(self)

    def keys(self) -> list[int]:
        return list(range(len(self._items)))

    def values(self) -> list[T]:
        return list(self._items)

    def entries(self) -> list[tuple[int, T]]:
        return list(enumerate(self._items))

    # ---------------------------------------------------------------
    # Region operations
    # ---------------------------------------------------------------

    def slice(self, start: SupportsIndex = 0, end: SupportsIndex | None = None) -> jsarray[T]:
        """Return a new jsarray with the elements in [start, end).

        Args:
            start: First index to include. Negative counts from the end.
            end: Index to stop before (default: length). Negative counts from the end.

        Note:
            Out-of-range bounds are clamped; this never raises IndexError.
        """
        length = len(self._items)
        start_idx = _normalize_index(start, length)
        end_idx = length if end is None else _normalize_index(end, length)
        return jsarray(self._items[start_idx:end_idx])

    def splice(self, start: SupportsIndex, delete_count: SupportsIndex = 0, *items: T) -> jsarray[T]:
        """Remove elements and insert items in their place.

        Args:
            start: Index to start at. Negative counts from the end.
            delete_count: Number of elements to remove (default 0), clamped
                to what is available after start
            *items: Elements to insert at start

        Returns:
            New jsarray of the removed elements, in their original order
        """
        length = len(self._items)
        start_idx = _normalize_index(start, length)
        count = max(0, min(op_index(delete_count), length - start_idx))

        removed = self._items[start_idx : start_idx + count]
        self._items[start_idx : start_idx + count] = items
        logger.debug("splice at %d removed %d inserted %d", start_idx, count, len(items))
        return jsarray(removed)

    def copy_within(self, target: SupportsIndex, start: SupportsIndex = 0, end: SupportsIndex | None = None) -> Self:
        """Copy the [start, end) region to target, overwriting, without changing length.

        Args:
            target: Destination index. Negative counts from the end.
            start: First source index. Negative counts from the end, except
                that when end is also negative, start resolves to the
                normalized end.
            end: Source index to stop before (default: length)

        Returns:
            self
        """
        length = len(self._items)
        target_idx = _normalize_index(target, length)

        raw_end = None if end is None else op_index(end)
        end_idx = length if raw_end is None else _normalize_index(raw_end, length)

        raw_start = op_index(start)
        if raw_start < 0 and raw_end is not None and raw_end < 0:
            start_idx = end_idx
        else:
            start_idx = _normalize_index(raw_start, length)

        # Snapshot the source so overlapping writes can't corrupt it
        source = self._items[start_idx:end_idx]
        count = min(len(source), length - target_idx)
        self._items[target_idx : target_idx + count] = source[:count]
        logger.debug("copy_within [%d, %d) to %d, %d copied", start_idx, end_idx, target_idx, count)
        return self

    def fill(self, value: T, start: SupportsIndex = 0, end: SupportsIndex | None = None) -> Self:
        """Overwrite every element in [start, end) with value.

        Returns:
            self
        """
        length = len(self._items)
        start_idx = _normalize_index(start, length)
        end_idx = length if end is None else _normalize_index(end, length)

        for idx in range(start_idx, end_idx):
            self._items[idx] = value
        logger.debug("fill [%d, %d)", start_idx, end_idx)
        return self

    # ---------------------------------------------------------------
    # Traversal
    # ---------------------------------------------------------------
    # Callbacks receive (value, index, array), or (accumulator, value, index,
    # array) for reducers. Mutating the array from a callback is not supported;
    # the results are unspecified.

    def every(self, predicate: Callable[..., Any]) -> bool:
        """Return True if predicate holds for all elements; stops at the first failure."""
        call = _bind_callback(predicate, 3, 1)
        for index, value in self._snapshot():
            if not call(value, index, self):
                return False
        return True

    def some(self, predicate: Callable[..., Any]) -> bool:
        """Return True if predicate holds for any element; stops at the first success."""
        call = _bind_callback(predicate, 3, 1)
        for index, value in self._snapshot():
            if call(value, index, self):
                return True
        return False

    def filter(self, predicate: Callable[..., Any]) -> jsarray[T]:
        """Return a new jsarray of the elements for which predicate is true."""
        call = _bind_callback(predicate, 3, 1)
        return jsarray(value for index, value in self._snapshot() if call(value, index, self))

    def find_all(self, predicate: Callable[..., Any]) -> jsarray[T]:
        """Same as :meth:`filter`."""
        return self.filter(predicate)

    def find(self, predicate: Callable[..., Any]) -> T | None:
        """Return the first element for which predicate is true, or None."""
        call = _bind_callback(predicate, 3, 1)
        for index, value in self._snapshot():
            if call(value, index, self):
                return value
        return None

    def find_index(self, predicate: Callable[..., Any]) -> int:
        """Return the index of the first element for which predicate is true, or -1."""
        call = _bind_callback(predicate, 3, 1)
        for index, value in self._snapshot():
            if call(value, index, self):
                return index
        return -1

    def find_last(self, predicate: Callable[..., Any]) -> T | None:
        """Return the last element for which predicate is true, or None.

        Every element is visited in ascending order; the latest match wins.
        """
        call = _bind_callback(predicate, 3, 1)
        result = None
        for index, value in self._snapshot():
            if call(value, index, self):
                result = value
        return result

    def find_last_index(self, predicate: Callable[..., Any]) -> int:
        """Return the index of the last element for which predicate is true, or -1."""
        call = _bind_callback(predicate, 3, 1)
        result = -1
        for index, value in self._snapshot():
            if call(value, index, self):
                result = index
        return result

    def for_each(self, fn: Callable[..., Any]) -> None:
        call = _bind_callback(fn, 3, 1)
        for index, value in self._snapshot():
            call(value, index, self)

    def map(self, fn: Callable[..., Any]) -> jsarray[Any]:
        """Return a new jsarray of ``fn(value, index, array)`` results."""
        call = _bind_callback(fn, 3, 1)
        return jsarray(call(value, index, self) for index, value in self._snapshot())

    def reduce(self, fn: Callable[..., Any], initial: Any = None) -> Any:
        """Fold left to right.

        Args:
            fn: Called as ``fn(accumulator, value, index, array)``
            initial: Starting accumulator (default None)

        Returns:
            The final accumulator; initial when the array is empty
        """
        call = _bind_callback(fn, 4, 2)
        result = initial
        for index, value in self._snapshot():
            result = call(result, value, index, self)
        return result

    def reduce_right(self, fn: Callable[..., Any], initial: Any = None) -> Any:
        """Fold right to left. See :meth:`reduce`."""
        call = _bind_callback(fn, 4, 2)
        result = initial
        for index in range(len(self._items) - 1, -1, -1):
            if index >= len(self._items):
                continue
            result = call(result, self._items[index], index, self)
        return result

    def remove_all(self, predicate: Callable[..., Any]) -> None:
        """Keep only the elements for which predicate is false."""
        call = _bind_callback(predicate, 3, 1)
        kept = [value for index, value in self._snapshot() if not call(value, index, self)]
        logger.debug("remove_all removed %d", len(self._items) - len(kept))
        self._items = kept

    def index_of(self, search: T, from_index: SupportsIndex = 0) -> int:
        """Return the first index of search at or after from_index, or -1."""
        for idx in range(_normalize_index(from_index, len(self._items)), len(self._items)):
            if _same_value(self._items[idx], search):
                return idx
        return -1

    def last_index_of(self, search: T, from_index: SupportsIndex = 0) -> int:
        """Return the last index of search at or after from_index, or -1."""
        result = -1
        for idx in range(_normalize_index(from_index, len(self._items)), len(self._items)):
            if _same_value(self._items[idx], search):
                result = idx
        return result

    def includes(self, search: T, from_index: SupportsIndex = 0) -> bool:
        return self.index_of(search, from_index) != -1

    def sort(
        self,
        comparefn: Callable[[T, T], float] | None = None,
        *,
        key: Callable[[T], SupportsRichComparison] | None = None,
        reverse: bool = False,
    ) -> Self:
        """Sort in place. The sort is stable.

        Args:
            comparefn: Three-way comparator returning a negative number, zero,
                or a positive number. Defaults to natural ordering.
            key: Optional key function, as for ``list.sort``
            reverse: If True, sort in descending order

        Raises:
            TypeError: If both comparefn and key are given
        """
        if comparefn is not None:
            if key is not None:
                raise TypeError("cannot specify both comparefn and key")
            key = cmp_to_key(comparefn)  # type: ignore[assignment]
        self._items.sort(key=key, reverse=reverse)  # type: ignore[arg-type]
        return self

    def reverse(self) -> jsarray[T]:
        """Return a new jsarray with the elements in reverse order."""
        return jsarray(reversed(self._items))

    def join(self, separator: str = DEFAULT_SEPARATOR) -> str:
        return separator.join(str(value) for value in self._items)

    def concat(self, *items: Any) -> jsarray[Any]:
        """Return a new jsarray of these elements followed by items."""
        result: jsarray[Any] = jsarray(self._items)
        result.add_range(items)
        return result


# Heterogeneous variant: the same container over arbitrary values
dynamicarray = jsarray[Any]
