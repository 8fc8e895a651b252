"""
Restable — the capability contract a model opts into to be searchable from a request.

A model declares ``Restable`` alongside ``db.Model`` and overrides whichever
hooks it needs:

    class Article(Restable, db.Model):
        @classmethod
        def searchables(cls):
            return ['title', 'body']

        @classmethod
        def matches(cls):
            return {'status': 'string', 'author_id': 'int'}

Every hook is a classmethod so it can be called on the model class itself.
"""
from __future__ import annotations

from flask import current_app, has_app_context

from core.restable.filters import MatchCollection

DEFAULT_PER_PAGE = 15


class Restable:
    """Mixin marking a model as usable by ``core.restable.search.Search``."""

    @classmethod
    def searchables(cls) -> list:
        """Columns searched by the free-text ``search`` parameter, in order."""
        return []

    @classmethod
    def matches(cls) -> dict[str, str]:
        """Request keys matched exactly, mapped to their match type."""
        return {}

    @classmethod
    def collect_matches(cls, request, model) -> MatchCollection:
        return MatchCollection(cls.matches()).map_into_filter(model)

    @classmethod
    def restable_query(cls, query):
        """Final hook applied after match and search filters."""
        return query

    @classmethod
    def per_page(cls) -> int:
        if has_app_context():
            return int(current_app.config.get('RESTABLE_PER_PAGE', DEFAULT_PER_PAGE))
        return DEFAULT_PER_PAGE


def is_restable(obj) -> bool:
    """True when ``obj`` (a class or an instance) implements ``Restable``."""
    model = obj if isinstance(obj, type) else type(obj)
    return issubclass(model, Restable)
