"""
Database models for the Restable search demo
"""
from datetime import datetime
from flask_sqlalchemy import SQLAlchemy

from core.restable import Restable

db = SQLAlchemy()


class Author(db.Model):
    """Article author. Not searchable from requests."""
    __tablename__ = 'authors'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(255), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    # Relationships
    articles = db.relationship('Article', backref='author', lazy='dynamic')

    def __repr__(self):
        return f'<Author {self.email}>'

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'email': self.email,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }


class Article(Restable, db.Model):
    """Published or draft article, listable with search/match/perPage parameters"""
    __tablename__ = 'articles'

    id = db.Column(db.Integer, primary_key=True)
    author_id = db.Column(db.Integer, db.ForeignKey('authors.id'), nullable=False, index=True)
    title = db.Column(db.String(255), nullable=False)
    body = db.Column(db.Text, default='')

    # Status: 'draft', 'active', 'archived'
    status = db.Column(db.String(50), default='draft', index=True)
    is_featured = db.Column(db.Boolean, default=False, nullable=False)

    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    def __repr__(self):
        return f'<Article {self.title}>'

    @classmethod
    def searchables(cls):
        return ['title', 'body']

    @classmethod
    def matches(cls):
        return {
            'status': 'string',
            'author_id': 'int',
            'is_featured': 'bool',
        }

    @classmethod
    def restable_query(cls, query):
        """Newest first"""
        return query.order_by(cls.created_at.desc(), cls.id.desc())

    @classmethod
    def per_page(cls):
        return 10

    def to_dict(self):
        """Convert article to dictionary for API responses"""
        return {
            'id': self.id,
            'author_id': self.author_id,
            'title': self.title,
            'body': self.body,
            'status': self.status,
            'is_featured': self.is_featured,
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'updated_at': self.updated_at.isoformat() if self.updated_at else None,
        }
