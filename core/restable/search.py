"""
Search — applies request parameters to a query for a Restable model.

Order of operations for a query:
    1. match filters (always)
    2. free-text search over the model's searchables (only when ``search`` is set),
       added as a single parenthesised OR group
    3. the model's ``restable_query`` hook

Typical use inside a route:

    query = Search.apply(request, Article)
    page = Search(request, query, Article).paginate()

or, in one call, ``paginate(request, Article)``.
"""
from __future__ import annotations

from flask import current_app, has_app_context

from core.restable.contract import Restable
from core.restable.exceptions import TypeMismatch
from core.restable.filters import SearchableCollection, request_input


def _config(key: str, default: str) -> str:
    if has_app_context():
        return current_app.config.get(key, default)
    return default


def query_model(query):
    """Return the mapped class a query selects from, or None."""
    descriptions = query.column_descriptions
    if not descriptions:
        return None
    return descriptions[0].get('entity')


class Search:
    """Request-scoped adapter; build one per request and discard it."""

    def __init__(self, request, builder, model):
        self.request = request
        self.builder = builder
        self.model = model

    @classmethod
    def apply(cls, request, model):
        """Apply the request to a fresh query for ``model``.

        Raises:
            TypeMismatch: If ``model`` is not a Restable model class.
        """
        if not isinstance(model, type):
            raise TypeMismatch.should_be(Restable, type(model))
        if not issubclass(model, Restable):
            raise TypeMismatch.should_be(Restable, model)

        return cls.query(request, model.query)

    @classmethod
    def query(cls, request, builder):
        """Apply the request to an existing query.

        Raises:
            TypeMismatch: If the query's model is not a Restable model class.
        """
        model = query_model(builder)
        if not isinstance(model, type) or not issubclass(model, Restable):
            raise TypeMismatch.should_be(Restable, model)

        search = cls(request, builder, model)

        return model.restable_query(
            search.search(request, search.match(request, builder))
        )

    def paginate(self):
        """Paginate ``self.builder`` at the resolved page size."""
        return self.builder.paginate(per_page=self.get_per_page(), error_out=False)

    def search(self, request, builder):
        term = request_input(request, _config('RESTABLE_SEARCH_PARAM', 'search'))
        # JSON numbers are searched as text; lists, objects and booleans are ignored
        if isinstance(term, (int, float)) and not isinstance(term, bool):
            term = str(term)
        if not term or not isinstance(term, str):
            return builder

        return (
            SearchableCollection(self.model.searchables())
            .map_into_filter(self.model)
            .apply(request, builder, term)
        )

    def match(self, request, builder):
        return self.model.collect_matches(request, self.model).apply(request, builder)

    def get_per_page(self) -> int:
        raw = request_input(self.request, _config('RESTABLE_PER_PAGE_PARAM', 'perPage'))
        if raw is not None:
            try:
                return int(raw)
            except (TypeError, ValueError):
                pass
        return self.model.per_page()


def paginate(request, target):
    """Run ``Search`` for a model class or query and paginate the result."""
    if isinstance(target, type):
        builder = Search.apply(request, target)
    else:
        builder = Search.query(request, target)
    return Search(request, builder, query_model(builder)).paginate()
