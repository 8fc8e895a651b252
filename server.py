#!/usr/bin/env python3
"""
Restable Search Server
A small Flask server exposing request-driven search over Restable models
"""

from flask import Flask, jsonify
from flask_cors import CORS
import os
from pathlib import Path
from datetime import datetime
import secrets

BASE_DIR = Path(__file__).parent

app = Flask(__name__)
CORS(app, supports_credentials=True)

app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', secrets.token_hex(32))

# Database configuration
database_url = os.environ.get('DATABASE_URL', f'sqlite:///{BASE_DIR}/restable.db')

# Fix Heroku's postgres:// scheme (should be postgresql://)
if database_url and database_url.startswith('postgres://'):
    database_url = database_url.replace('postgres://', 'postgresql://', 1)

app.config['SQLALCHEMY_DATABASE_URI'] = database_url
app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

if database_url and database_url.startswith('postgresql://'):
    app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {
        'pool_size': 5,
        'max_overflow': 10,
        'pool_recycle': 300,  # Recycle connections after 5 minutes
        'pool_pre_ping': True,
        'pool_timeout': 30,
    }
else:
    # SQLite settings (for local dev)
    app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {
        'pool_pre_ping': True
    }

# Search layer configuration
app.config['RESTABLE_PER_PAGE'] = int(os.environ.get('RESTABLE_PER_PAGE', 15))
app.config['RESTABLE_SEARCH_PARAM'] = os.environ.get('RESTABLE_SEARCH_PARAM', 'search')
app.config['RESTABLE_PER_PAGE_PARAM'] = os.environ.get('RESTABLE_PER_PAGE_PARAM', 'perPage')

# Import and initialize database
from models import db
db.init_app(app)

# Initialize rate limiter
from rate_limiter import init_limiter
limiter = init_limiter(app)

# Register article listing routes
from routes.article_routes import register_article_routes
register_article_routes(app)


@app.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint to verify database connection"""
    try:
        db.session.execute(db.text('SELECT 1'))
        db.session.commit()
        return jsonify({
            'status': 'healthy',
            'database': 'connected',
            'timestamp': datetime.utcnow().isoformat()
        })
    except Exception as e:
        return jsonify({
            'status': 'unhealthy',
            'database': 'disconnected',
            'error': str(e),
            'timestamp': datetime.utcnow().isoformat()
        }), 503


if __name__ == '__main__':
    with app.app_context():
        db.create_all()

    print("=" * 60)
    print("🔎 Restable Search Server")
    print("=" * 60)
    print(f"Database: {database_url}")
    print(f"Default page size: {app.config['RESTABLE_PER_PAGE']}")
    print("Server starting on http://localhost:5000")
    print("=" * 60)

    app.run(host='0.0.0.0', port=5000, debug=True)
