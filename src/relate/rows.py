"""Output row type shared by the join operators."""

from typing import Any, NamedTuple


class JoinRow(NamedTuple):
	"""
	One join result: a ``(left, right)`` pair.

	``None`` on a side means that side had no matching record. Being a
	tuple, a JoinRow compares equal to the plain 2-tuple with the same items.
	"""

	left: Any
	right: Any

	@property
	def matched(self) -> bool:
		"""True when both sides hold a record."""
		return self.left is not None and self.right is not None
