# Copyright 2025 Softwell S.r.l. - Genropy Team
# SPDX-License-Identifier: Apache-2.0

"""Tests for Label, Path, NonEmpty and the unsound helpers."""

import pytest

from genro_filetree import (
    EmptyPathError,
    FileTreeError,
    InvalidLabelError,
    Label,
    NonEmpty,
    Path,
    unsound,
)


class TestLabel:
    """Tests for Label."""

    def test_label_is_a_string(self):
        """Test a label compares and hashes like its string."""
        label = Label('main.rs')
        assert label == 'main.rs'
        assert hash(label) == hash('main.rs')
        assert {label: 1}['main.rs'] == 1

    def test_repr(self):
        """Test string representation."""
        assert repr(Label('main.rs')) == "Label('main.rs')"

    def test_labels_are_ordered(self):
        """Test labels sort as strings."""
        labels = [Label('foo.hs'), Label('bar.hs'), Label('baz.hs')]
        assert sorted(labels) == ['bar.hs', 'baz.hs', 'foo.hs']

    def test_empty_label_raises(self):
        """Test an empty label is rejected."""
        with pytest.raises(InvalidLabelError, match="empty"):
            Label('')

    def test_separator_in_label_raises(self):
        """Test a label containing '/' is rejected."""
        with pytest.raises(InvalidLabelError, match="separator"):
            Label('foo/bar')

    def test_invalid_label_is_value_error(self):
        """Test InvalidLabelError belongs to both hierarchies."""
        with pytest.raises(ValueError):
            Label('a/b')
        with pytest.raises(FileTreeError):
            Label('')

    def test_unchecked_skips_validation(self):
        """Test unchecked builds labels the constructor would reject."""
        assert Label.unchecked('foo/bar') == 'foo/bar'
        assert Label.unchecked('') == ''
        assert isinstance(Label.unchecked('x'), Label)

    def test_root(self):
        """Test the root label."""
        root = Label.root()
        assert root == '~'
        assert root.is_root is True
        assert Label('foo').is_root is False


class TestPathConstructors:
    """Tests for the ways of building a Path."""

    def test_root_path(self):
        """Test the root path is the singleton root label."""
        path = Path.root()
        assert path.labels == (Label.root(),)
        assert path.is_root() is True
        assert len(path) == 1

    def test_empty_path_raises(self):
        """Test a Path cannot be empty."""
        with pytest.raises(EmptyPathError):
            Path([])

    def test_new(self):
        """Test a single-label path."""
        path = Path.new(Label('foo'))
        assert list(path) == ['foo']
        assert path.is_root() is False

    def test_from_labels_matches_push(self):
        """Test from_labels equals the same labels pushed one at a time."""
        path = Path.from_labels(
            Label.root(), [Label('foo'), Label('bar'), Label('baz.rs')]
        )
        expected = Path.root().push(Label('foo')).push(Label('bar')).push(Label('baz.rs'))
        assert path == expected
        assert list(path) == ['~', 'foo', 'bar', 'baz.rs']

    def test_from_labels_head_only(self):
        """Test from_labels with no tail."""
        assert Path.from_labels(Label('foo')) == Path.new(Label('foo'))

    def test_from_string(self):
        """Test splitting on the separator."""
        path = Path.from_string('foo/bar/baz.rs')
        assert path == Path.from_labels(Label('foo'), [Label('bar'), Label('baz.rs')])

    def test_from_string_trims_separators(self):
        """Test leading and trailing separators are ignored."""
        expected = Path.from_labels(Label('foo'), [Label('bar'), Label('baz')])
        assert Path.from_string('foo/bar/baz/') == expected
        assert Path.from_string('/foo/bar/baz') == expected
        assert Path.from_string('//foo/bar/baz//') == expected

    def test_from_string_empty_is_root(self):
        """Test the empty string and a bare separator give the root path."""
        assert Path.from_string('') == Path.root()
        assert Path.from_string('/') == Path.root()

    def test_from_string_does_not_validate(self):
        """Test empty inner segments are kept as they are."""
        path = Path.from_string('a//b')
        assert path.labels == ('a', '', 'b')


class TestPathOperations:
    """Tests for Path operations."""

    def test_str_and_repr(self):
        """Test string forms."""
        path = Path.from_string('foo/bar')
        assert str(path) == 'foo/bar'
        assert repr(path) == "Path('foo/bar')"

    def test_hashable(self):
        """Test paths work as dict keys."""
        mapping = {Path.from_string('foo/bar'): 1}
        assert mapping[Path.from_labels(Label('foo'), [Label('bar')])] == 1

    def test_not_equal_to_other_types(self):
        """Test comparison with a non-Path."""
        assert Path.from_string('foo') != 'foo'

    def test_append(self):
        """Test appending two paths."""
        path1 = Path.from_labels(Label('foo'), [Label('bar')])
        path2 = Path.from_labels(Label('baz'), [Label('quux')])
        result = path1.append(path2)
        assert result == Path.from_string('foo/bar/baz/quux')

    def test_append_and_push_do_not_alias(self):
        """Test append and push leave the original path unchanged."""
        path = Path.from_string('foo/bar')
        path.append(Path.from_string('baz'))
        path.push(Label('quux'))
        assert path == Path.from_string('foo/bar')

    def test_split_first(self):
        """Test the first label and the rest."""
        assert Path.from_string('foo/bar/baz').split_first() == ('foo', ['bar', 'baz'])
        assert Path.from_string('foo').split_first() == ('foo', [])

    def test_split_last_single(self):
        """Test a single label gives an empty prefix."""
        assert Path.from_string('foo').split_last() == ([], 'foo')

    def test_split_last_two(self):
        """Test a two-label path."""
        assert Path.from_string('foo/bar').split_last() == (['foo'], 'bar')

    def test_split_last_three(self):
        """Test a three-label path."""
        assert Path.from_string('foo/bar/baz').split_last() == (['foo', 'bar'], 'baz')

    def test_split_last_keeps_repeated_first_label(self):
        """Test the first label stays in the prefix when it equals the last."""
        assert Path.from_string('foo/bar/foo').split_last() == (['foo', 'bar'], 'foo')
        assert Path.from_string('x/x').split_last() == (['x'], 'x')

    def test_split_last_root(self):
        """Test splitting the root path."""
        assert Path.root().split_last() == ([], Label.root())


class TestNonEmpty:
    """Tests for NonEmpty."""

    def test_head_and_tail(self):
        """Test the parts of a NonEmpty."""
        items = NonEmpty('a', ['b', 'c'])
        assert items.head == 'a'
        assert items.tail == ('b', 'c')
        assert items.last == 'c'
        assert list(items) == ['a', 'b', 'c']
        assert len(items) == 3

    def test_single(self):
        """Test a NonEmpty with no tail."""
        items = NonEmpty('a')
        assert len(items) == 1
        assert items.last == 'a'
        assert items[0] == 'a'

    def test_from_iterable(self):
        """Test building from an iterable."""
        items = NonEmpty.from_iterable(iter(['x', 'y']))
        assert items == NonEmpty('x', ['y'])

    def test_from_empty_iterable_raises(self):
        """Test an empty iterable is rejected."""
        with pytest.raises(EmptyPathError):
            NonEmpty.from_iterable([])

    def test_map(self):
        """Test map keeps the shape."""
        assert NonEmpty(1, [2, 3]).map(lambda n: n * 10) == NonEmpty(10, [20, 30])

    def test_getitem_and_hash(self):
        """Test indexing and hashing."""
        items = NonEmpty('a', ['b'])
        assert items[1] == 'b'
        assert items[-1] == 'b'
        assert hash(items) == hash(NonEmpty('a', ['b']))

    def test_repr(self):
        """Test string representation."""
        assert repr(NonEmpty('a', ['b'])) == "NonEmpty('a', ['b'])"


class TestUnsound:
    """Tests for the unchecked helpers."""

    def test_label(self):
        """Test unsound.label skips validation."""
        assert unsound.label('a/b') == 'a/b'
        assert isinstance(unsound.label('a'), Label)

    def test_path(self):
        """Test unsound.path splits on the separator."""
        assert unsound.path('foo/bar.hs') == Path.from_string('foo/bar.hs')
        assert unsound.path('') == Path.root()
