"""
Errors raised by the restable search layer.
"""
from __future__ import annotations


def _type_name(obj) -> str:
    if isinstance(obj, str):
        return obj
    if isinstance(obj, type):
        return obj.__name__
    return type(obj).__name__


class TypeMismatch(TypeError):
    """A model (or the model behind a query) does not implement the contract.

    Attributes:
        expected: Name of the required contract.
        actual: Name of the offending type.
    """

    def __init__(self, expected: str, actual: str):
        self.expected = expected
        self.actual = actual
        super().__init__(f'{actual} should be an instance of {expected}.')

    @classmethod
    def should_be(cls, expected, actual) -> 'TypeMismatch':
        return cls(_type_name(expected), _type_name(actual))
