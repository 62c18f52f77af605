"""Tests for reflection helpers."""

from allkit.reflection import class_of, superclasses_of_type


class A:
    pass


class B(A):
    pass


class C(B):
    pass


class TestClassOf:
    def test_builtin_values(self):
        assert class_of([]) is list
        assert class_of(1) is int
        assert class_of("s") is str

    def test_instances(self):
        assert class_of(C()) is C

    def test_none(self):
        assert class_of(None) is None


class TestSuperclassesOfType:
    def test_chain(self):
        assert superclasses_of_type(C) == [B, A, object]

    def test_builtin(self):
        assert superclasses_of_type(list) == [object]
        assert superclasses_of_type(bool) == [int, object]

    def test_object(self):
        assert superclasses_of_type(object) == [object]

    def test_excludes_self(self):
        assert A not in superclasses_of_type(A)
