class RelateError(Exception):
	"""Base exception for relate."""
	pass


class ConfigurationError(RelateError, ValueError):
	"""Raised for an invalid key specifier, join kind or projection column."""
	pass


class CardinalityError(RelateError, ValueError):
	"""Raised when a join's cardinality expectation is violated."""
	pass


class RelateKeyError(RelateError, KeyError):
	"""Raised when a join key cannot be hashed."""
	pass


class RelateIndexError(RelateError, IndexError):
	"""Raised when a positional key is out of range for a record."""
	pass


class RelateWarning(UserWarning):
	"""Non-fatal diagnostics emitted while joining."""
	pass
