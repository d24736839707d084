from __future__ import annotations


class NilType:
    """Result of forms evaluated only for their effect (define, set!)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "nil"
    def __bool__(self): return False

    def __eq__(self, other):
        return isinstance(other, NilType)

    def __hash__(self):
        return hash(NilType)


class UnassignedType:
    """Placeholder bound by Environment.extend until the real value arrives."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self): return "#<unassigned>"


Nil = NilType()
Unassigned = UnassignedType()
