"""
Key extraction for joins and projections.

A key specifier says how to derive a join key from a record:

  - a field name (``str`` or ``Field``): the record is a mapping, and a
    missing field yields ``None``
  - a position (non-negative ``int`` or ``Position``): the record is a
    fixed-arity sequence
  - a callable: used as-is
  - a list/tuple of specifiers (or ``Composite``): the key is the tuple of
    each part's value

Specifiers are resolved once, up front, into a plain ``record -> key``
function. Nothing here touches a record until the accessor is called.
"""

from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from .errors import ConfigurationError, RelateIndexError


Accessor = Callable[[Any], Any]


@dataclass(frozen=True)
class Field:
	"""Look the key up by name in a mapping-like record."""

	name: Any

	def __repr__(self):
		return f"field({self.name!r})"


@dataclass(frozen=True)
class Position:
	"""Take the key from a fixed position of a sequence-like record."""

	index: int

	def __post_init__(self):
		if isinstance(self.index, bool) or not isinstance(self.index, int):
			raise ConfigurationError(
				f"Position index must be an int, got {type(self.index).__name__}"
			)
		if self.index < 0:
			raise ConfigurationError(
				f"Position index must be non-negative, got {self.index}"
			)

	def __repr__(self):
		return f"position({self.index})"


@dataclass(frozen=True)
class Composite:
	"""Combine several specifiers into one tuple-valued key."""

	parts: Tuple[Any, ...]

	def __post_init__(self):
		if not self.parts:
			raise ConfigurationError("Composite key needs at least 1 part")

	def __repr__(self):
		return f"composite{self.parts!r}"


def field(name) -> Field:
	return Field(name)


def position(index: int) -> Position:
	return Position(index)


def _field_accessor(name) -> Accessor:
	def get_field(record):
		if isinstance(record, Mapping):
			return record.get(name)
		try:
			return record[name]
		except (KeyError, IndexError):
			return None
	return get_field


def _position_accessor(index: int) -> Accessor:
	def get_position(record):
		try:
			return record[index]
		except IndexError as e:
			raise RelateIndexError(
				f"Position {index} is out of range for record {record!r}"
			) from e
	return get_position


def _composite_accessor(parts) -> Accessor:
	accessors = tuple(resolve(part) for part in parts)

	def get_composite(record):
		return tuple(f(record) for f in accessors)
	return get_composite


def resolve(spec) -> Accessor:
	"""
	Turn a key specifier into a ``record -> key`` function.

	Raises
	------
	ConfigurationError
		If ``spec`` is not a supported specifier (``None``, a bool, a
		negative int, an empty composite, or any other non-callable value).
	"""
	# bool is an int subclass; True/False are never positions
	if isinstance(spec, bool):
		raise ConfigurationError(f"Unsupported key specifier: {spec!r}")

	if isinstance(spec, Field):
		return _field_accessor(spec.name)
	if isinstance(spec, Position):
		return _position_accessor(spec.index)
	if isinstance(spec, Composite):
		return _composite_accessor(spec.parts)

	if isinstance(spec, str):
		return _field_accessor(spec)
	if isinstance(spec, int):
		return _position_accessor(Position(spec).index)
	if isinstance(spec, (list, tuple)):
		return _composite_accessor(Composite(tuple(spec)).parts)
	if callable(spec):
		return spec

	raise ConfigurationError(
		f"Key specifier must be a field name, non-negative position, callable "
		f"or list of those, got {type(spec).__name__}"
	)


def resolve_pair(spec1, spec2: Optional[Any] = None) -> Tuple[Accessor, Accessor]:
	"""
	Resolve the two sides' specifiers for one join call.

	When ``spec2`` is ``None`` (or ``False``) the accessor resolved from
	``spec1`` is used for both sides.
	"""
	f1 = resolve(spec1)
	if spec2 is None or spec2 is False:
		return f1, f1
	return f1, resolve(spec2)
