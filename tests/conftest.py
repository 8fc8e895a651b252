"""
Pytest configuration and shared fixtures for Restable search tests
"""
import pytest
import os
import sys
import tempfile
from datetime import datetime, timedelta
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

# Set test environment before importing app
os.environ['FLASK_ENV'] = 'testing'
os.environ['TESTING'] = 'true'

# The engine is created when server.py calls db.init_app, so the test database
# URL has to be in the environment before the first import of server
_DB_FD, _DB_PATH = tempfile.mkstemp(suffix='.db')
os.environ['DATABASE_URL'] = f'sqlite:///{_DB_PATH}'


@pytest.fixture(scope='session')
def app():
    """Create and configure a test Flask application instance"""
    from server import app as flask_app
    from models import db
    from rate_limiter import limiter

    flask_app.config.update({
        'TESTING': True,
        'SECRET_KEY': 'test-secret-key',
        'RESTABLE_PER_PAGE': 15,
        'RESTABLE_SEARCH_PARAM': 'search',
        'RESTABLE_PER_PAGE_PARAM': 'perPage',
    })

    # Disable rate limiting for tests (must be done after init_limiter ran)
    limiter.enabled = False

    # Create tables inside a persistent app context
    with flask_app.app_context():
        db.create_all()
        yield flask_app
        db.session.remove()
        db.drop_all()

    # Close and remove temporary database
    os.close(_DB_FD)
    os.unlink(_DB_PATH)


@pytest.fixture(autouse=True)
def _clean_db(app):
    """Clean up data between tests to avoid UNIQUE constraint violations."""
    from models import db
    yield
    db.session.rollback()
    for table in reversed(db.metadata.sorted_tables):
        db.session.execute(table.delete())
    db.session.commit()
    db.session.remove()


@pytest.fixture(scope='function')
def client(app):
    """Create a test client for the Flask application"""
    return app.test_client()


@pytest.fixture
def author(app):
    """Create a test author"""
    from models import Author, db

    author = Author(
        name='Ada',
        email='ada@example.com',
        created_at=datetime.utcnow(),
    )
    db.session.add(author)
    db.session.commit()
    return author


@pytest.fixture
def other_author(app):
    """Create a second test author"""
    from models import Author, db

    author = Author(
        name='Grace',
        email='grace@example.com',
        created_at=datetime.utcnow(),
    )
    db.session.add(author)
    db.session.commit()
    return author


@pytest.fixture
def articles(app, author, other_author):
    """Create a small, deterministic set of articles (oldest first)"""
    from models import Article, db

    base = datetime(2026, 1, 1)
    rows = [
        ('Flask tips', 'Blueprints and app factories', 'active', author.id, True),
        ('SQLAlchemy queries', 'Filtering with LIKE', 'active', author.id, False),
        ('Draft notes', 'Nothing about flask here', 'draft', author.id, False),
        ('Old news', 'Archived flask content', 'archived', other_author.id, False),
        ('Pagination', 'Pages and per page sizes', 'active', other_author.id, True),
    ]
    created = []
    for i, (title, body, status, author_id, featured) in enumerate(rows):
        article = Article(
            title=title,
            body=body,
            status=status,
            author_id=author_id,
            is_featured=featured,
            created_at=base + timedelta(days=i),
        )
        db.session.add(article)
        created.append(article)
    db.session.commit()
    return created
