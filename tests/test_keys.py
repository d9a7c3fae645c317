import pytest
from relate import Field, Position, Composite, field, position, resolve, resolve_pair
from relate.errors import ConfigurationError, RelateIndexError


def test_field_name_reads_mapping():
	"""Test string spec looks the key up in a dict"""
	f = resolve('k')
	assert f({'k': 1, 'v': 'one'}) == 1


def test_field_missing_is_none():
	"""Test missing field yields None instead of raising"""
	assert resolve('k')({'v': 'a'}) is None
	assert resolve(field('k'))({'v': 'a'}) is None


def test_field_on_non_mapping_subscriptable():
	"""Test field lookup falls back to subscripting for non-dict records"""
	class Row:
		def __getitem__(self, name):
			if name == 'k':
				return 7
			raise KeyError(name)

	f = resolve('k')
	assert f(Row()) == 7
	assert resolve('missing')(Row()) is None


def test_position_reads_tuple():
	"""Test int spec indexes into a tuple"""
	assert resolve(1)((0, 'zero')) == 'zero'
	assert resolve(position(0))((0, 'zero')) == 0


def test_position_out_of_range_raises_index_error():
	"""Test short record raises an IndexError when visited"""
	f = resolve(3)
	with pytest.raises(RelateIndexError, match="Position 3 is out of range"):
		f((1, 2))
	with pytest.raises(IndexError):
		f((1, 2))


def test_callable_returned_unchanged():
	"""Test function specs pass straight through"""
	def key(record):
		return record.upper()
	assert resolve(key) is key


def test_composite_key():
	"""Test list spec builds a tuple key from each part"""
	f = resolve(['a', 1])
	assert f({'a': 'x', 1: 'y'}) == ('x', 'y')
	g = resolve(Composite(('a', len)))
	assert g({'a': 5}) == (5, 1)


@pytest.mark.parametrize('spec', [-1, None, True, False, 1.5, object(), [], ()])
def test_invalid_specs_raise_configuration_error(spec):
	"""Test unsupported specs fail at resolution time"""
	with pytest.raises(ConfigurationError):
		resolve(spec)


def test_empty_composite_rejected():
	"""Test Composite with no parts is rejected on construction"""
	with pytest.raises(ConfigurationError, match="at least 1 part"):
		Composite(())


def test_negative_position_rejected():
	"""Test Position refuses negative indexes"""
	with pytest.raises(ConfigurationError, match="non-negative"):
		Position(-2)
	with pytest.raises(ValueError):
		position(-1)


def test_configuration_error_is_value_error():
	"""Test ConfigurationError can be caught as ValueError"""
	with pytest.raises(ValueError):
		resolve(-5)


def test_resolve_pair_defaults_to_first():
	"""Test omitted/None/False second spec reuses the first accessor"""
	f1, f2 = resolve_pair('k')
	assert f1 is f2
	f1, f2 = resolve_pair('k', None)
	assert f1 is f2
	f1, f2 = resolve_pair('k', False)
	assert f1 is f2


def test_resolve_pair_distinct_specs():
	"""Test explicit second spec is resolved separately"""
	f1, f2 = resolve_pair(0, 'n')
	assert f1((4, 'four')) == 4
	assert f2({'n': 4}) == 4


def test_field_repr():
	"""Test specifier reprs read like the helper calls"""
	assert repr(Field('k')) == "field('k')"
	assert repr(Position(2)) == "position(2)"


def test_field_out_of_range_on_sequence_is_none():
	"""Test a field lookup that misses on a list yields None, not IndexError"""
	assert resolve(field(3))([1]) is None
	assert resolve(Field(0))([]) is None
