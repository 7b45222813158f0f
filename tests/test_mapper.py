import builtins
import functools

import pytest

from seqmap import InvalidArgumentError, builtin_map, iter_map, map_sequence


def square(x):
    return x * x


class Recorder:
    """Callable that records every element it is invoked with."""

    def __init__(self, fn=lambda x: x):
        self.calls = []
        self.fn = fn

    def __call__(self, item):
        self.calls.append(item)
        return self.fn(item)


class TestMapSequence:
    """Behaviour of the eager mapper."""

    @pytest.mark.parametrize(
        "sequence",
        [[], [1], [1, 2, 3], (4, 5), "abc", range(10)],
    )
    def test_length_and_elements(self, sequence):
        result = map_sequence(sequence, repr)
        assert len(result) == len(sequence)
        for i, item in enumerate(sequence):
            assert result[i] == repr(item)

    def test_order_preserved(self):
        assert map_sequence([1, 2, 3], square) == [1, 4, 9]

    def test_returns_list(self):
        assert map_sequence((1, 2), square) == [1, 4]
        assert isinstance(map_sequence((1, 2), square), list)

    def test_empty_never_invokes_transform(self):
        recorder = Recorder()
        assert map_sequence([], recorder) == []
        assert recorder.calls == []

    def test_identity_is_new_list(self):
        source = [1, 2, 3]
        result = map_sequence(source, lambda x: x)
        assert result == source
        assert result is not source

        result.append(4)
        assert source == [1, 2, 3]

    def test_non_destructive_update(self):
        users = [{"id": 1, "level": "user"}]
        admins = map_sequence(users, lambda u: {**u, "level": "admin"})

        assert admins == [{"id": 1, "level": "admin"}]
        assert users == [{"id": 1, "level": "user"}]

    def test_output_type_may_differ(self):
        assert map_sequence([1, 2], lambda n: {"value": n}) == [
            {"value": 1},
            {"value": 2},
        ]
        names = map_sequence([1, "a", None], lambda v: type(v).__name__)
        assert names == ["int", "str", "NoneType"]

    def test_invoked_once_per_element_in_order(self):
        recorder = Recorder(square)
        assert map_sequence([3, 1, 2], recorder) == [9, 1, 4]
        assert recorder.calls == [3, 1, 2]

    def test_accepts_generator(self):
        assert map_sequence((n for n in range(3)), square) == [0, 1, 4]

    def test_accepts_dict_keys(self):
        assert map_sequence({"a": 1, "b": 2}.keys(), str.upper) == ["A", "B"]

    def test_transform_failure_propagates(self):
        calls = []

        def fail_on_two(x):
            calls.append(x)
            if x == 2:
                raise ValueError("boom")
            return x

        with pytest.raises(ValueError, match="boom"):
            map_sequence([1, 2, 3], fail_on_two)

        assert calls == [1, 2]

    def test_transform_failure_not_wrapped(self):
        error = KeyError("missing")

        def fail(_):
            raise error

        with pytest.raises(KeyError) as exc_info:
            map_sequence([1], fail)
        assert exc_info.value is error

    def test_accepts_builtins_and_partials(self):
        assert map_sequence(["1", "2"], int) == [1, 2]
        assert map_sequence([[1], [1, 2]], len) == [1, 2]
        assert map_sequence([1, 2], functools.partial(pow, 2)) == [2, 4]

    def test_accepts_bound_method(self):
        assert map_sequence(["a", "b"], "-".join) == ["a", "b"]
        assert map_sequence([" a ", "b "], str.strip) == ["a", "b"]


class TestInvalidArguments:
    """Argument validation happens before any transform call."""

    @pytest.mark.parametrize("sequence", [None, 42, 1.5, object()])
    def test_non_iterable_sequence(self, sequence):
        recorder = Recorder()
        with pytest.raises(InvalidArgumentError):
            map_sequence(sequence, recorder)
        assert recorder.calls == []

    @pytest.mark.parametrize("sequence", [{1, 2}, frozenset({1})])
    def test_unordered_sequence(self, sequence):
        with pytest.raises(InvalidArgumentError, match="ordered"):
            map_sequence(sequence, square)

    @pytest.mark.parametrize("transform", [None, 123, "upper", [square]])
    def test_non_callable_transform(self, transform):
        with pytest.raises(InvalidArgumentError, match="callable"):
            map_sequence([1, 2], transform)

    @pytest.mark.parametrize(
        "transform",
        [lambda: 1, lambda a, b: a, lambda *, key: key],
    )
    def test_wrong_arity(self, transform):
        with pytest.raises(InvalidArgumentError, match="one"):
            map_sequence([1, 2], transform)

    def test_optional_extra_arguments_allowed(self):
        assert map_sequence([1, 2], lambda x, y=10: x + y) == [11, 12]
        assert map_sequence([1, 2], lambda *args: args) == [(1,), (2,)]

    def test_is_type_error(self):
        with pytest.raises(TypeError):
            map_sequence(None, square)


class TestIterMap:
    """Behaviour of the lazy mapper."""

    def test_basic(self):
        assert list(iter_map((0, 1, 2), lambda x: x + 1)) == [1, 2, 3]

    def test_lazy(self):
        recorder = Recorder(square)
        results = iter_map([1, 2, 3], recorder)
        assert recorder.calls == []

        assert next(results) == 1
        assert recorder.calls == [1]

        assert list(results) == [4, 9]
        assert recorder.calls == [1, 2, 3]

    def test_validates_eagerly(self):
        with pytest.raises(InvalidArgumentError):
            iter_map([1], None)
        with pytest.raises(InvalidArgumentError):
            iter_map(5, square)

    def test_failure_raised_on_consumption(self):
        def fail_on_two(x):
            if x == 2:
                raise RuntimeError("bad element")
            return x

        results = iter_map([1, 2, 3], fail_on_two)
        assert next(results) == 1
        with pytest.raises(RuntimeError, match="bad element"):
            next(results)


class TestBuiltinMap:
    """The builtin wrapper delegates to builtins.map."""

    def test_basic(self):
        assert list(builtin_map(["a", "b"], lambda s: s.upper())) == ["A", "B"]

    def test_returns_builtin_map_object(self):
        assert isinstance(builtin_map([1], square), builtins.map)

    def test_builtin_not_shadowed(self):
        import seqmap.core.mapper as mapper_module

        assert not hasattr(mapper_module, "map")
        assert builtins.map is map

    def test_validates_eagerly(self):
        with pytest.raises(InvalidArgumentError):
            builtin_map([1], None)
        with pytest.raises(InvalidArgumentError):
            builtin_map({1}, square)
