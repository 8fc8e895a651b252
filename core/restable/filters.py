"""
Match and searchable filters applied by the restable search layer.

Match filters turn request parameters into exact constraints:

    ?status=active          status = 'active'
    ?status=-archived       status != 'archived'
    ?author_id=1,2,3        author_id IN (1, 2, 3)
    ?author_id=-1,2         author_id NOT IN (1, 2)

Searchable filters turn the free-text search term into one LIKE clause per
column, OR-ed together into a single group.
"""
from __future__ import annotations

from sqlalchemy import or_

MATCH_TYPES = ('string', 'int', 'bool')

_TRUE_VALUES = {'1', 'true', 'yes', 'on'}
_FALSE_VALUES = {'0', 'false', 'no', 'off'}


def request_input(request, key, default=None):
    """Look up ``key`` in the query string, then in a JSON body."""
    if key in request.args:
        return request.args.get(key)
    if request.is_json:
        data = request.get_json(silent=True) or {}
        if isinstance(data, dict) and key in data:
            return data[key]
    return default


def resolve_column(model, column):
    """Return the mapped attribute for ``column`` (a name or an attribute)."""
    if not isinstance(column, str):
        return column
    attr = getattr(model, column, None)
    if attr is None:
        raise ValueError(f'{model.__name__} has no column {column!r}')
    return attr


# ---------------------------------------------------------------------------
# Search
# ---------------------------------------------------------------------------

class SearchableFilter:
    """LIKE filter over a single column."""

    def __init__(self, column):
        self.column = column
        self.attribute = None

    def bind(self, model) -> 'SearchableFilter':
        self.attribute = resolve_column(model, self.column)
        return self

    def clause(self, search: str):
        return self.attribute.like(f'%{search}%')


class SearchableCollection:
    """The searchable columns of a model, applied as one OR group."""

    def __init__(self, searchables):
        self.filters = [
            item if isinstance(item, SearchableFilter) else SearchableFilter(item)
            for item in searchables
        ]

    def __len__(self):
        return len(self.filters)

    def map_into_filter(self, model) -> 'SearchableCollection':
        for f in self.filters:
            f.bind(model)
        return self

    def clause(self, search: str):
        """OR of every column clause, or None when nothing is searchable."""
        if not self.filters:
            return None
        return or_(*[f.clause(search) for f in self.filters])

    def apply(self, request, query, search: str):
        clause = self.clause(search)
        if clause is None:
            return query
        return query.filter(clause.self_group())


# ---------------------------------------------------------------------------
# Match
# ---------------------------------------------------------------------------

def cast_match_value(value, match_type: str):
    """Cast a single raw request value to ``match_type``.

    Raises:
        ValueError: If the value cannot be read as that type.
    """
    if match_type == 'int':
        return int(value)
    if match_type == 'bool':
        if isinstance(value, bool):
            return value
        lowered = str(value).strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f'Invalid boolean value: {value!r}')
    return value if isinstance(value, str) else str(value)


class MatchFilter:
    """Exact constraint driven by a single request key."""

    def __init__(self, key: str, match_type: str = 'string', column=None):
        if match_type not in MATCH_TYPES:
            raise ValueError(
                f'Unknown match type {match_type!r} for {key!r}. Allowed: {list(MATCH_TYPES)}'
            )
        self.key = key
        self.match_type = match_type
        self.column = column if column is not None else key
        self.attribute = None

    def bind(self, model) -> 'MatchFilter':
        self.attribute = resolve_column(model, self.column)
        return self

    def parse(self, raw):
        """Split a raw value into ``(negated, values)``; None if absent."""
        if raw is None or raw == '':
            return None

        if isinstance(raw, (list, tuple)):
            return False, [cast_match_value(v, self.match_type) for v in raw]

        if not isinstance(raw, str):
            return False, [cast_match_value(raw, self.match_type)]

        negated = raw.startswith('-')
        if negated:
            raw = raw[1:]
        parts = [p.strip() for p in raw.split(',') if p.strip() != '']
        if not parts:
            return None
        return negated, [cast_match_value(p, self.match_type) for p in parts]

    def apply(self, request, query):
        parsed = self.parse(request_input(request, self.key))
        if parsed is None:
            return query

        negated, values = parsed
        if len(values) == 1:
            value = values[0]
            clause = self.attribute != value if negated else self.attribute == value
        else:
            clause = self.attribute.not_in(values) if negated else self.attribute.in_(values)
        return query.filter(clause)


class MatchCollection:
    """Every match filter a model declares, applied in declaration order."""

    def __init__(self, matches):
        if isinstance(matches, dict):
            matches = matches.items()
        self.filters = []
        for item in matches:
            if isinstance(item, MatchFilter):
                self.filters.append(item)
            elif isinstance(item, str):
                self.filters.append(MatchFilter(item))
            else:
                self.filters.append(MatchFilter(*item))

    def __len__(self):
        return len(self.filters)

    def map_into_filter(self, model) -> 'MatchCollection':
        for f in self.filters:
            f.bind(model)
        return self

    def apply(self, request, query):
        for f in self.filters:
            query = f.apply(request, query)
        return query
