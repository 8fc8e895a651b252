"""
Article Routes — listing endpoints driven by search / match / perPage parameters.
"""
from flask import jsonify, request

from core.restable import Search
from models import Article, Author
from rate_limiter import limiter


def _page_payload(key, page):
    return {
        key: [item.to_dict() for item in page.items],
        'total': page.total,
        'page': page.page,
        'pages': page.pages,
        'per_page': page.per_page,
    }


def register_article_routes(app):
    """Register article and author listing routes"""

    @app.route('/api/articles', methods=['GET'])
    @limiter.limit("60 per minute")
    def list_articles():
        """List articles (paginated).

        Query params:
            search     — free text over title and body
            status     — exact status, '-archived' to exclude, 'a,b' for any of
            author_id  — exact author id(s)
            is_featured — true/false
            perPage    — page size (default 10)
            page       — page number
        """
        try:
            query = Search.apply(request, Article)
            articles = Search(request, query, Article).paginate()
            return jsonify(_page_payload('articles', articles))
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        except Exception as e:
            print(f"❌ Error listing articles: {e}")
            return jsonify({'error': str(e)}), 500

    @app.route('/api/authors/<int:author_id>/articles', methods=['GET'])
    @limiter.limit("60 per minute")
    def list_author_articles(author_id):
        """List one author's articles, with the same parameters as /api/articles."""
        author = Author.query.filter_by(id=author_id).first()
        if not author:
            return jsonify({'error': 'Author not found'}), 404

        try:
            query = Search.query(request, Article.query.filter_by(author_id=author.id))
            articles = Search(request, query, Article).paginate()
            return jsonify(_page_payload('articles', articles))
        except ValueError as e:
            return jsonify({'error': str(e)}), 400
        except Exception as e:
            print(f"❌ Error listing articles for author {author_id}: {e}")
            return jsonify({'error': str(e)}), 500

    @app.route('/api/authors', methods=['GET'])
    @limiter.limit("60 per minute")
    def list_authors():
        """List authors by name (paginated). Authors take no search parameters."""
        try:
            per_page = request.args.get('perPage', 15, type=int)
            authors = Author.query.order_by(Author.name)\
                .paginate(per_page=per_page, error_out=False)
            return jsonify(_page_payload('authors', authors))
        except Exception as e:
            print(f"❌ Error listing authors: {e}")
            return jsonify({'error': str(e)}), 500
