"""Tests for Kind and Value."""

import dataclasses

import numpy as np
import pytest

from paramsweep.data.types import Kind, Value
from paramsweep.errors import TypeMismatchError


class TestValueOf:
    def test_infers_bool_before_int(self):
        assert Value.of(True).kind is Kind.BOOL
        assert Value.of(np.bool_(False)).kind is Kind.BOOL

    def test_infers_integers(self):
        assert Value.of(3).kind is Kind.INT
        assert Value.of(np.int32(3)).kind is Kind.INT
        assert Value.of(np.uint32(3)).kind is Kind.UINT

    def test_infers_floats(self):
        assert Value.of(0.5).kind is Kind.DOUBLE
        assert Value.of(np.float64(0.5)).kind is Kind.DOUBLE
        assert Value.of(np.float32(0.5)).kind is Kind.FLOAT

    def test_rejects_other_types(self):
        with pytest.raises(TypeMismatchError):
            Value.of("3")
        with pytest.raises(TypeMismatchError):
            Value.of(None)

    def test_coerce_passes_values_through(self):
        v = Value.int_(4)
        assert Value.coerce(v) is v
        assert Value.coerce(4) == v


class TestExplicitKinds:
    def test_int_rejects_float_and_bool(self):
        with pytest.raises(TypeMismatchError):
            Value.int_(1.5)
        with pytest.raises(TypeMismatchError):
            Value.int_(True)

    def test_uint_rejects_negative(self):
        with pytest.raises(TypeMismatchError):
            Value.uint(-1)
        assert Value.uint(7).raw == 7

    def test_bool_rejects_int(self):
        with pytest.raises(TypeMismatchError):
            Value.bool_(1)

    def test_float32_stores_numpy_scalar(self):
        v = Value.float32(10)
        assert v.kind is Kind.FLOAT
        assert isinstance(v.raw, np.float32)

    def test_double_accepts_int(self):
        v = Value.double(2)
        assert v.raw == 2.0
        assert isinstance(v.raw, float)


class TestGet:
    def test_matching_kind(self):
        assert Value.of(3).get(Kind.INT) == 3

    def test_no_implicit_coercion(self):
        with pytest.raises(TypeMismatchError):
            Value.of(3).get(Kind.DOUBLE)
        with pytest.raises(TypeMismatchError):
            Value.of(True).get(Kind.INT)

    def test_kinds_distinguish_equal_numbers(self):
        assert Value.of(1) != Value.of(1.0)
        assert Value.of(True) != Value.of(1)

    def test_immutable(self):
        v = Value.of(3)
        with pytest.raises(dataclasses.FrozenInstanceError):
            v.raw = 4


class TestFormat:
    def test_bool(self):
        assert Value.of(True).format() == "true"
        assert Value.of(False).format() == "false"

    def test_integers(self):
        assert Value.of(3).format() == "3"
        assert Value.uint(12).format() == "12"

    def test_floats_fixed_six_decimals(self):
        assert Value.of(20.0).format() == "20.000000"
        assert Value.float32(0.5).format() == "0.500000"
        assert str(Value.of(2.0)) == "2.000000"


class TestKindFromAnnotation:
    @pytest.mark.parametrize("annotation,expected", [
        (bool, Kind.BOOL),
        (int, Kind.INT),
        (float, Kind.DOUBLE),
        (np.float32, Kind.FLOAT),
        (np.float64, Kind.DOUBLE),
        (np.uint32, Kind.UINT),
        ("bool", Kind.BOOL),
        ("np.float32", Kind.FLOAT),
        ("numpy.uint16", Kind.UINT),
    ])
    def test_known(self, annotation, expected):
        assert Kind.from_annotation(annotation) is expected

    def test_unknown_is_none(self):
        assert Kind.from_annotation(str) is None
        assert Kind.from_annotation("Any") is None
        assert Kind.from_annotation(None) is None
