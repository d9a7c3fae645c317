import pytest
from relate import resolve
from relate.index import Index
from relate.errors import CardinalityError, RelateKeyError, RelateWarning


def test_index_groups_keep_input_order():
	"""Test groups and entries preserve record order"""
	records = [(1, 'a'), (2, 'b'), (1, 'c')]
	index = Index.build(records, resolve(0), 'left')
	assert index.groups == {1: [(1, 'a'), (1, 'c')], 2: [(2, 'b')]}
	assert index.entries == [(1, (1, 'a')), (2, (2, 'b')), (1, (1, 'c'))]
	assert 1 in index
	assert 3 not in index
	assert repr(index) == "Index(side='left', records=3, keys=2)"


def test_index_evaluates_each_key_once():
	"""Test the accessor runs once per record"""
	calls = []

	def key(record):
		calls.append(record)
		return record % 2

	Index.build(range(4), key, 'right')
	assert calls == [0, 1, 2, 3]


def test_index_unique_expectation():
	"""Test a uniqueness expectation rejects repeated keys"""
	with pytest.raises(CardinalityError, match="'one_to_one' violated: Right side has duplicate key 'x' \\(rows 0 and 2\\)"):
		Index.build(['x', 'y', 'x'], str, 'right', expect='one_to_one')


def test_index_unhashable_key():
	"""Test unhashable keys raise RelateKeyError from the TypeError"""
	with pytest.raises(RelateKeyError) as excinfo:
		Index.build([{'k': {1}}], resolve('k'), 'left')
	assert isinstance(excinfo.value.__cause__, TypeError)


def test_index_unique_expectation_nan_key():
	"""Test repeated NaN keys report the row of the first occurrence"""
	nan = float('nan')
	with pytest.warns(RelateWarning):
		with pytest.raises(CardinalityError, match="duplicate key nan \\(rows 0 and 1\\)"):
			Index.build([(nan,), (nan,)], resolve(0), 'left', expect='one_to_one')
