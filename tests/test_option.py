"""Tests for Option type (Some and Nothing)."""

import copy

import pytest
from hypothesis import given
from klaw_option import Nothing, NothingError, NothingType, Some, nothing, of_nullable, of_obj, some

from tests.strategies import integers, nullable_integers, values


class TestSomeCreation:
    """Tests for Some instantiation and basic properties."""

    def test_some_creation(self):
        """Some wraps a value."""
        assert Some(42).value == 42

    def test_some_constructor_function(self):
        """some() builds a Some."""
        assert some(42) == Some(42)

    def test_some_with_none(self):
        """Some can wrap None (Some(None) is not Nothing)."""
        option = Some(None)
        assert option.value is None
        assert option != Nothing
        assert option.is_some() is True

    def test_some_with_complex_value(self):
        """Some can wrap complex values."""
        data = {'key': [1, 2, 3]}
        assert Some(data).value == data

    def test_some_is_frozen(self):
        """Some instances are immutable."""
        option = Some(42)
        with pytest.raises(AttributeError):
            option.value = 100  # type: ignore[misc]

    def test_some_copy_is_equal(self):
        """Copies compare equal to the original."""
        option = Some([1, 2])
        assert copy.copy(option) == option


class TestNothingCreation:
    """Tests for Nothing singleton."""

    def test_nothing_is_singleton(self):
        """Nothing is the canonical NothingType instance."""
        assert Nothing is Nothing
        assert isinstance(Nothing, NothingType)
        assert nothing() is Nothing

    def test_nothing_type_instances_equal(self):
        """NothingType instances built anywhere are equal."""
        assert NothingType() == NothingType()
        assert NothingType() == Nothing

    def test_nothing_is_frozen(self):
        """Nothing is immutable."""
        with pytest.raises(AttributeError):
            Nothing.value = 42  # type: ignore[attr-defined]


class TestOptionEquality:
    """Tests for Option equality and hashing."""

    def test_some_equality(self):
        assert Some(42) == Some(42)
        assert Some('hello') == Some('hello')

    def test_some_inequality(self):
        assert Some(42) != Some(43)
        assert Some('hello') != Some('world')

    def test_some_not_equal_to_nothing(self):
        assert Some(42) != Nothing
        assert Nothing != Some(42)

    def test_some_not_equal_to_raw_value(self):
        """An option never equals the value it wraps."""
        assert Some(42) != 42

    def test_some_hashable(self):
        assert hash(Some(42)) == hash(Some(42))
        assert {Some(42): 'value'}[Some(42)] == 'value'

    def test_nothing_hashable(self):
        assert hash(Nothing) == hash(NothingType())
        assert {Nothing: 'value'}[NothingType()] == 'value'

    @given(values, values)
    def test_some_equality_follows_value_equality(self, v, w):
        assert (Some(v) == Some(w)) == (v == w)


class TestNoImplicitConversion:
    """Options have no truth value."""

    def test_some_bool_raises(self):
        with pytest.raises(TypeError, match='no truth value'):
            bool(Some(1))

    def test_nothing_bool_raises(self):
        with pytest.raises(TypeError, match='no truth value'):
            bool(Nothing)

    def test_if_on_option_raises(self):
        with pytest.raises(TypeError):
            if Some(0):
                pass


class TestPatternMatching:
    """Options support structural pattern matching."""

    @staticmethod
    def describe(option):
        match option:
            case Some(value):
                return f'some {value}'
            case NothingType():
                return 'nothing'
        return 'unreachable'

    def test_match_some(self):
        assert self.describe(Some(3)) == 'some 3'

    def test_match_nothing(self):
        assert self.describe(Nothing) == 'nothing'


class TestOptionQuerying:
    """Tests for is_some(), is_none(), count() and contains()."""

    def test_some_is_some(self):
        assert Some(42).is_some() is True
        assert Some(42).is_none() is False

    def test_nothing_is_none(self):
        assert Nothing.is_some() is False
        assert Nothing.is_none() is True

    def test_count(self):
        assert Some('x').count() == 1
        assert Nothing.count() == 0

    def test_contains(self):
        assert Some(3).contains(3) is True
        assert Some(3).contains(4) is False
        assert Nothing.contains(3) is False

    def test_contains_none_value(self):
        """Some(None) contains None; Nothing does not."""
        assert Some(None).contains(None) is True
        assert Nothing.contains(None) is False


class TestOptionGet:
    """Tests for get, default_value, default_with."""

    def test_some_get(self):
        assert Some(42).get() == 42

    def test_nothing_get_raises(self):
        with pytest.raises(NothingError, match='Called get on Nothing'):
            Nothing.get()

    def test_nothing_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            Nothing.get()

    def test_nothing_get_with_factory(self):
        """get(factory) raises the factory's exception."""
        with pytest.raises(KeyError, match='missing'):
            Nothing.get(lambda: KeyError('missing'))

    def test_some_get_with_factory_does_not_call_it(self, counter):
        factory = counter(ValueError('never'))
        assert Some(1).get(factory) == 1
        assert factory.count == 0

    def test_default_value(self):
        assert Some(42).default_value(0) == 42
        assert Nothing.default_value(0) == 0

    def test_some_default_with_does_not_call_thunk(self, counter):
        thunk = counter(0)
        assert Some(42).default_with(thunk) == 42
        assert thunk.count == 0

    def test_nothing_default_with_calls_thunk(self, counter):
        thunk = counter(7)
        assert Nothing.default_with(thunk) == 7
        assert thunk.count == 1


class TestOptionPredicates:
    """Tests for exists, for_all and filter."""

    def test_exists(self):
        assert Some(5).exists(lambda x: x > 3) is True
        assert Some(1).exists(lambda x: x > 3) is False

    def test_nothing_exists_is_false(self, counter):
        pred = counter(True)
        assert Nothing.exists(pred) is False
        assert pred.count == 0

    def test_for_all(self):
        assert Some(5).for_all(lambda x: x > 3) is True
        assert Some(1).for_all(lambda x: x > 3) is False

    def test_nothing_for_all_is_vacuously_true(self, counter):
        pred = counter(False)
        assert Nothing.for_all(pred) is True
        assert pred.count == 0

    def test_some_filter_passes(self):
        assert Some(5).filter(lambda x: x > 0) == Some(5)

    def test_some_filter_fails(self):
        assert Some(5).filter(lambda x: x < 0) is Nothing

    def test_nothing_filter_never_calls_predicate(self, counter):
        pred = counter(True)
        assert Nothing.filter(pred) is Nothing
        assert pred.count == 0


class TestOptionMap:
    """Tests for map, map2 and map3."""

    def test_some_map(self):
        assert Some(5).map(lambda x: x * 2) == Some(10)

    def test_some_map_chain(self):
        assert Some(5).map(lambda x: x * 2).map(str) == Some('10')

    def test_some_map_to_none_stays_some(self):
        """Mapping to None produces Some(None), not Nothing."""
        assert Some(5).map(lambda x: None) == Some(None)

    def test_nothing_map_never_calls_function(self, counter):
        f = counter(1)
        assert Nothing.map(f) is Nothing
        assert f.count == 0

    def test_map2(self):
        assert Some(2).map2(Some(3), lambda a, b: a * b) == Some(6)
        assert Some(2).map2(Nothing, lambda a, b: a * b) is Nothing
        assert Nothing.map2(Some(3), lambda a, b: a * b) is Nothing

    def test_map3(self):
        add3 = lambda a, b, c: a + b + c  # noqa: E731
        assert Some(1).map3(Some(2), Some(3), add3) == Some(6)
        assert Some(1).map3(Nothing, Some(3), add3) is Nothing
        assert Some(1).map3(Some(2), Nothing, add3) is Nothing
        assert Nothing.map3(Some(2), Some(3), add3) is Nothing


class TestOptionBind:
    """Tests for bind, or_else and or_else_with."""

    def test_some_bind_returns_some(self):
        assert Some(5).bind(lambda x: Some(x * 2)) == Some(10)

    def test_some_bind_returns_nothing(self):
        assert Some(5).bind(lambda x: Nothing) is Nothing

    def test_nothing_bind_never_calls_binder(self, counter):
        binder = counter(Some(1))
        assert Nothing.bind(binder) is Nothing
        assert binder.count == 0

    def test_some_or_else(self):
        assert Some(42).or_else(Some(0)) == Some(42)

    def test_nothing_or_else(self):
        assert Nothing.or_else(Some(0)) == Some(0)
        assert Nothing.or_else(Nothing) is Nothing

    def test_some_or_else_with_never_calls_thunk(self, counter):
        thunk = counter(Some(0))
        assert Some(42).or_else_with(thunk) == Some(42)
        assert thunk.count == 0

    def test_nothing_or_else_with(self, counter):
        thunk = counter(Some(0))
        assert Nothing.or_else_with(thunk) == Some(0)
        assert thunk.count == 1


class TestOptionFlattenFold:
    """Tests for flatten, fold, fold_back and iter."""

    def test_some_flatten(self):
        assert Some(Some(42)).flatten() == Some(42)

    def test_some_flatten_nothing(self):
        assert Some(Nothing).flatten() is Nothing

    def test_nothing_flatten(self):
        assert Nothing.flatten() is Nothing

    def test_fold(self):
        assert Some(3).fold(lambda acc, x: acc + x, 10) == 13
        assert Nothing.fold(lambda acc, x: acc + x, 10) == 10

    def test_fold_back_matches_fold(self):
        folder = lambda acc, x: acc * 10 + x  # noqa: E731
        assert Some(3).fold_back(folder, 1) == Some(3).fold(folder, 1) == 13
        assert Nothing.fold_back(folder, 1) == 1

    def test_some_iter_calls_action(self, counter):
        action = counter()
        assert Some(3).iter(action) is None
        assert action.calls == [(3,)]

    def test_nothing_iter_is_noop(self, counter):
        action = counter()
        Nothing.iter(action)
        assert action.count == 0

    def test_exceptions_from_callbacks_propagate(self):
        def boom(x):
            raise ValueError('boom')

        with pytest.raises(ValueError, match='boom'):
            Some(1).map(boom)
        with pytest.raises(ValueError, match='boom'):
            Some(1).iter(boom)


class TestOptionConversion:
    """Tests for container and nullable conversions."""

    def test_to_tuple(self):
        assert Some(1).to_tuple() == (1,)
        assert Nothing.to_tuple() == ()

    def test_to_list(self):
        assert Some(1).to_list() == [1]
        assert Nothing.to_list() == []

    def test_to_iter(self):
        assert list(Some(1).to_iter()) == [1]
        assert list(Nothing.to_iter()) == []

    def test_to_obj(self):
        sentinel = object()
        assert Some(sentinel).to_obj() is sentinel
        assert Nothing.to_obj() is None

    def test_to_nullable(self):
        assert Some(5).to_nullable() == 5
        assert Nothing.to_nullable() is None

    def test_of_obj(self):
        assert of_obj('x') == Some('x')
        assert of_obj(None) is Nothing

    def test_of_obj_keeps_falsy_values(self):
        """Only None is absent; 0, '' and [] are values."""
        assert of_obj(0) == Some(0)
        assert of_obj('') == Some('')
        assert of_obj([]) == Some([])

    def test_of_nullable(self):
        assert of_nullable(3) == Some(3)
        assert of_nullable(None) is Nothing

    @given(nullable_integers)
    def test_nullable_round_trip(self, value):
        assert of_nullable(value).to_nullable() == value

    @given(values)
    def test_obj_round_trip(self, value):
        assert of_obj(value).to_obj() is value

    @given(integers)
    def test_single_element_containers(self, value):
        option = Some(value)
        assert len(option.to_tuple()) == len(option.to_list()) == 1
        assert option.to_list()[0] == value
