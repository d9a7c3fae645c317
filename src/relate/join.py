"""
Relational joins over arbitrary iterables of records.

Every operator takes two iterables and one or two key specifiers (see
``relate.keys``) and returns a list of ``JoinRow(left, right)``. When
``key2`` is omitted the first specifier is used on both sides.

Keys are compared with ``==`` and must be hashable. Repeated keys are
legal on both sides: each key group contributes the full Cartesian
product of its left and right records.
"""

from __future__ import annotations
from typing import Any, Iterable, List, Optional, Tuple

from .errors import ConfigurationError
from .index import Index
from .keys import resolve_pair
from .rows import JoinRow


JOIN_KINDS = ('inner', 'left', 'right', 'outer')
EXPECTATIONS = ('one_to_one', 'many_to_one', 'one_to_many', 'many_to_many')

_HOW_ALIASES = {'full': 'outer'}


def _build_indices(seq1: Iterable, seq2: Iterable, key1, key2, expect: str) -> Tuple[Index, Index]:
	"""Resolve both key specifiers, then index each side once."""
	# Validate cardinality flag early
	if expect not in EXPECTATIONS:
		raise ConfigurationError(
			f"Invalid expect={expect!r}. "
			"Must be one of 'one_to_one', 'many_to_one', 'one_to_many', 'many_to_many'."
		)

	f1, f2 = resolve_pair(key1, key2)

	left_unique = expect if expect in ('one_to_one', 'one_to_many') else None
	right_unique = expect if expect in ('one_to_one', 'many_to_one') else None

	left = Index.build(seq1, f1, 'left', expect=left_unique)
	right = Index.build(seq2, f2, 'right', expect=right_unique)
	return left, right


def _inner_rows(left: Index, right: Index) -> List[JoinRow]:
	rows = []
	append = rows.append
	right_get = right.groups.get

	for key, record in left.entries:
		matches = right_get(key)
		if not matches:
			continue  # INNER JOIN → skip non-matches
		for other in matches:
			append(JoinRow(record, other))
	return rows


def _left_rows(left: Index, right: Index) -> List[JoinRow]:
	rows = []
	append = rows.append
	right_get = right.groups.get

	for key, record in left.entries:
		matches = right_get(key)
		if matches:
			for other in matches:
				append(JoinRow(record, other))
		else:
			append(JoinRow(record, None))
	return rows


def _right_rows(left: Index, right: Index) -> List[JoinRow]:
	rows = []
	append = rows.append
	left_get = left.groups.get

	for key, record in right.entries:
		matches = left_get(key)
		if matches:
			for other in matches:
				append(JoinRow(other, record))
		else:
			append(JoinRow(None, record))
	return rows


def _outer_rows(left: Index, right: Index) -> List[JoinRow]:
	# Matched keys and left-only keys
	rows = _left_rows(left, right)
	append = rows.append

	# Right-only keys
	for key, record in right.entries:
		if key not in left:
			append(JoinRow(None, record))
	return rows


_ROW_BUILDERS = {
	'inner': _inner_rows,
	'left': _left_rows,
	'right': _right_rows,
	'outer': _outer_rows,
}


def _run(kind: str, seq1: Iterable, seq2: Iterable, key1, key2, expect: str) -> List[JoinRow]:
	"""Index both sides, then emit the rows for ``kind``."""
	left, right = _build_indices(seq1, seq2, key1, key2, expect)
	return _ROW_BUILDERS[kind](left, right)


def inner_join(seq1: Iterable, seq2: Iterable, key1, key2: Optional[Any] = None, *, expect: str = 'many_to_many') -> List[JoinRow]:
	"""
	Pairs of records from ``seq1`` and ``seq2`` whose keys are equal.

	Rows follow ``seq1`` order; a left record with several matches is paired
	with each of them in ``seq2`` order.

	>>> inner_join([{'k': 0, 'v': 'zero'}, {'k': 1, 'v': 'one'}],
	...            [{'k': 1, 'v': 'i'}, {'k': 2, 'v': 'ii'}], 'k')
	[JoinRow(left={'k': 1, 'v': 'one'}, right={'k': 1, 'v': 'i'})]
	"""
	return _run('inner', seq1, seq2, key1, key2, expect)


def left_join(seq1: Iterable, seq2: Iterable, key1, key2: Optional[Any] = None, *, expect: str = 'many_to_many') -> List[JoinRow]:
	"""
	Like ``inner_join``, plus ``(record, None)`` for every record of
	``seq1`` that matched nothing in ``seq2``.

	Every left record appears at least once, in ``seq1`` order.

	>>> left_join([{'k': 0, 'v': 'zero'}, {'k': 1, 'v': 'one'}],
	...           [{'k': 1, 'v': 'i'}, {'k': 2, 'v': 'ii'}], 'k')
	[JoinRow(left={'k': 0, 'v': 'zero'}, right=None), JoinRow(left={'k': 1, 'v': 'one'}, right={'k': 1, 'v': 'i'})]
	"""
	return _run('left', seq1, seq2, key1, key2, expect)


def right_join(seq1: Iterable, seq2: Iterable, key1, key2: Optional[Any] = None, *, expect: str = 'many_to_many') -> List[JoinRow]:
	"""
	Mirror of ``left_join``: every record of ``seq2`` appears at least once,
	in ``seq2`` order, with ``(None, record)`` when nothing in ``seq1``
	matched it. Matches for one right record follow ``seq1`` order.

	>>> right_join([{'k': 0, 'v': 'zero'}, {'k': 1, 'v': 'one'}],
	...            [{'k': 1, 'v': 'i'}, {'k': 2, 'v': 'ii'}], 'k')
	[JoinRow(left={'k': 1, 'v': 'one'}, right={'k': 1, 'v': 'i'}), JoinRow(left=None, right={'k': 2, 'v': 'ii'})]
	"""
	return _run('right', seq1, seq2, key1, key2, expect)


def outer_join(seq1: Iterable, seq2: Iterable, key1, key2: Optional[Any] = None, *, expect: str = 'many_to_many') -> List[JoinRow]:
	"""
	Full outer join: the rows of ``left_join`` followed by ``(None, record)``
	for every record of ``seq2`` whose key never occurs in ``seq1``.

	Matched pairs are produced once per (left record, right record)
	combination. Records are never compared with each other, so identical
	duplicate records keep their multiplicity.

	>>> outer_join([{'k': 0, 'v': 'zero'}, {'k': 1, 'v': 'one'}],
	...            [{'k': 1, 'v': 'i'}, {'k': 2, 'v': 'ii'}], 'k')
	[JoinRow(left={'k': 0, 'v': 'zero'}, right=None), JoinRow(left={'k': 1, 'v': 'one'}, right={'k': 1, 'v': 'i'}), JoinRow(left=None, right={'k': 2, 'v': 'ii'})]
	"""
	return _run('outer', seq1, seq2, key1, key2, expect)


def join(seq1: Iterable, seq2: Iterable, key1, key2: Optional[Any] = None, *, how: str = 'inner', expect: str = 'many_to_many') -> List[JoinRow]:
	"""
	Join two iterables of records.

	Args:
		seq1: Left records
		seq2: Right records
		key1: Key specifier for ``seq1`` (and ``seq2`` if ``key2`` is None)
		key2: Key specifier for ``seq2``
		how: 'inner', 'left', 'right' or 'outer' ('full' is an alias)
		expect: Cardinality expectation - 'one_to_one', 'many_to_one',
		        'one_to_many' or 'many_to_many'

	Returns:
		List of JoinRow
	"""
	kind = _HOW_ALIASES.get(how, how) if isinstance(how, str) else None
	if kind not in _ROW_BUILDERS:
		raise ConfigurationError(
			f"Invalid how={how!r}. Must be one of {', '.join(JOIN_KINDS)} (or 'full')."
		)
	return _run(kind, seq1, seq2, key1, key2, expect)
