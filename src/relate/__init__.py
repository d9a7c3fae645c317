"""
relate: relational joins over plain Python iterables

Join any two iterables of records - dicts, tuples, objects - on a key taken
from a field name, a position, or a function, and get back a list of
``(left, right)`` pairs.

Main functions:
    - inner_join / left_join / right_join / outer_join
    - join: the same, selected with how='inner' | 'left' | 'right' | 'outer'
    - select: flatten join rows into tuples of chosen columns

Zero external dependencies - pure Python stdlib only.
"""

from .errors import RelateError, ConfigurationError, CardinalityError, RelateKeyError, RelateIndexError, RelateWarning
from .keys import Field, Position, Composite, field, position, resolve, resolve_pair
from .rows import JoinRow
from .join import inner_join, left_join, right_join, outer_join, join
from .select import select

__version__ = "0.3.0"
__all__ = [
	"inner_join",
	"left_join",
	"right_join",
	"outer_join",
	"join",
	"select",
	"JoinRow",
	"Field",
	"Position",
	"Composite",
	"field",
	"position",
	"resolve",
	"resolve_pair",
	"RelateError",
	"ConfigurationError",
	"CardinalityError",
	"RelateKeyError",
	"RelateIndexError",
	"RelateWarning",
]
