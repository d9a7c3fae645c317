"""Per-side hash index used by the join operators."""

from __future__ import annotations
import warnings
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple

from .errors import CardinalityError, RelateKeyError, RelateWarning


class Index:
	"""
	Key -> records mapping for one input side of a join.

	Groups keep the records in input order, and ``entries`` keeps every
	``(key, record)`` pair in input order, so the side can be replayed
	without re-reading (or re-evaluating keys on) the original iterable.
	"""

	__slots__ = ('side', 'groups', 'entries')

	def __init__(self, side: str):
		self.side = side
		self.groups: Dict[Any, List[Any]] = {}
		self.entries: List[Tuple[Any, Any]] = []

	@classmethod
	def build(cls, records: Iterable, accessor: Callable, side: str, expect: Optional[str] = None) -> "Index":
		"""
		Consume ``records`` once and index them by ``accessor``.

		Args:
			records: Any iterable of records
			accessor: Resolved ``record -> key`` function
			side: 'left' or 'right', used in error messages
			expect: Name of a cardinality expectation that requires this side
			        to have unique keys, or None to allow repeats

		Raises:
			RelateKeyError: If a key is not hashable
			CardinalityError: If ``expect`` is given and a key repeats
		"""
		index = cls(side)
		groups = index.groups
		groups_get = groups.get
		append_entry = index.entries.append
		warned_float = False

		for row_idx, record in enumerate(records):
			key = accessor(record)

			try:
				bucket = groups_get(key)
			except TypeError as e:
				raise RelateKeyError(
					f"Join key on {side} side at row {row_idx} is not hashable: "
					f"{type(key).__name__}. Join keys must be hashable."
				) from e

			if bucket is None:
				groups[key] = [record]
			else:
				if expect is not None:
					raise CardinalityError(
						f"Join expectation '{expect}' violated: {side.capitalize()} side "
						f"has duplicate key {key!r} "
						f"(rows {index._first_row(key)} and {row_idx})"
					)
				bucket.append(record)

			if not warned_float and _has_float(key):
				warnings.warn(
					f"Floating-point join key on {side} side at row {row_idx}; "
					"float keys only match on exact equality.",
					RelateWarning,
					# build -> _build_indices -> _run -> public join -> caller
					stacklevel=5,
				)
				warned_float = True

			append_entry((key, record))

		return index

	def _first_row(self, key) -> int:
		for row_idx, (k, _) in enumerate(self.entries):
			if k is key or k == key:
				return row_idx
		return -1

	def __contains__(self, key) -> bool:
		return key in self.groups

	def __repr__(self):
		return f"Index(side={self.side!r}, records={len(self.entries)}, keys={len(self.groups)})"


def _has_float(key) -> bool:
	if isinstance(key, float):
		return True
	if isinstance(key, tuple):
		return any(isinstance(part, float) for part in key)
	return False
