"""Column projection over join output."""

from __future__ import annotations
from typing import Any, Iterable, List, Sequence, Tuple

from .errors import ConfigurationError
from .keys import resolve


SIDES = ('left', 'right')


def _resolve_columns(columns) -> List[Tuple[int, Any]]:
	resolved = []
	for i, column in enumerate(columns):
		try:
			side, spec = column
		except (TypeError, ValueError):
			raise ConfigurationError(
				f"Column {i} must be a (side, key) pair, got {column!r}"
			) from None
		if side not in SIDES:
			raise ConfigurationError(
				f"Column {i} has side {side!r}; must be 'left' or 'right'"
			)
		resolved.append((SIDES.index(side), resolve(spec)))
	return resolved


def select(rows: Iterable[Sequence], columns: Iterable[Tuple[str, Any]]) -> List[tuple]:
	"""
	Flatten join rows into tuples of selected values.

	Each column is a ``(side, key)`` pair: ``side`` is 'left' or 'right' and
	``key`` is any key specifier accepted by the joins. A column whose side
	is ``None`` in a row yields ``None``.

	>>> select([((0, 1, 2), ('a', 'b', 'c')), ((3, 4, 5), ('d', 'e', 'f'))],
	...        [('left', 0), ('right', 1), ('left', 2)])
	[(0, 'b', 2), (3, 'e', 5)]
	"""
	resolved = _resolve_columns(columns)

	out = []
	for row in rows:
		pair = tuple(row)
		out.append(tuple(
			None if pair[side] is None else accessor(pair[side])
			for side, accessor in resolved
		))
	return out
