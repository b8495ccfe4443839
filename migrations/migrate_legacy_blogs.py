"""
Migration Script: legacy blog posts to the blogs table
Imports posts written in the old format (description/category/date) as
published blog rows. Posts whose id or slug already exists are skipped.

Usage:
    python migrations/migrate_legacy_blogs.py [path/to/legacy_posts.json]
"""

import os
import sys
import json
from datetime import datetime

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from extensions import db
from models import Blog
from utils.helpers import slugify


DEFAULT_LEGACY_POSTS = [
    {
        "id": "1",
        "title": "The Art of Clean Code",
        "description": "Why writing readable code is just as important as writing working code.",
        "content": "Clean code is not just about formatting. It's about making your code understandable for others and your future self. In this post, we explore the principles of DRY, KISS, and SOLID, and how they apply to modern web development.",
        "date": "2025-01-15",
        "author": "Aman",
        "category": "Development",
    },
    {
        "id": "2",
        "title": "Cybersecurity Trends 2025",
        "description": "Emerging threats and how we can prepare for the future of digital security.",
        "content": "As we move into 2025, the cybersecurity landscape is evolving rapidly. AI-driven attacks are becoming more common, and traditional defense mechanisms are being challenged. We discuss Zero Trust architecture and the importance of proactive security.",
        "date": "2025-02-01",
        "author": "Aman",
        "category": "Cybersecurity",
    },
    {
        "id": "3",
        "title": "My Learning Journey",
        "description": "Reflecting on the path from Hello World to Full Stack Development.",
        "content": "It started with a simple HTML file. Then CSS. Then JavaScript. The journey has been long but rewarding. From struggling with flexbox to building complex full-stack applications with Next.js and MongoDB, here is my story.",
        "date": "2025-03-10",
        "author": "Aman",
        "category": "Personal",
    },
]


def parse_date(date_str):
    """Parse date string to datetime object"""
    if not date_str:
        return None
    formats = [
        '%Y-%m-%d %H:%M:%S',
        '%Y-%m-%d',
        '%Y-%m-%dT%H:%M:%S.%f',
        '%Y-%m-%dT%H:%M:%S'
    ]
    for fmt in formats:
        try:
            return datetime.strptime(date_str, fmt)
        except ValueError:
            continue
    return None


def legacy_post_to_blog(post):
    """Map a legacy post dictionary to Blog column values"""
    created = parse_date(post.get('date')) or datetime.utcnow()
    category = (post.get('category') or 'General').lower()
    return {
        'id': str(post['id']),
        'title': post['title'],
        'slug': slugify(post['title']),
        'excerpt': post.get('description', ''),
        'content': post.get('content', ''),
        'author': post.get('author', ''),
        'tags': [category],
        'cover_image': None,
        'published': True,
        'created_at': created,
        'updated_at': created,
    }


def migrate_posts(posts):
    """
    Insert legacy posts that are not present yet.

    Returns:
        dict: {'added': int, 'skipped': int}
    """
    added = 0
    skipped = 0
    for post in posts:
        values = legacy_post_to_blog(post)
        exists = (
            db.session.get(Blog, values['id'])
            or Blog.query.filter_by(slug=values['slug']).first()
        )
        if exists:
            print(f"  [SKIP] {values['title']} (already imported)")
            skipped += 1
            continue
        db.session.add(Blog(**values))
        print(f"  [OK] {values['title']}")
        added += 1

    db.session.commit()
    return {'added': added, 'skipped': skipped}


def load_legacy_posts(json_file):
    """Read legacy posts from a JSON file, or use the bundled defaults"""
    if json_file and os.path.exists(json_file):
        with open(json_file, 'r', encoding='utf-8') as f:
            return json.load(f)
    return DEFAULT_LEGACY_POSTS


def main():
    """Main migration function"""
    print("=" * 60)
    print("Legacy Blog Migration Script")
    print("=" * 60)

    json_file = sys.argv[1] if len(sys.argv) > 1 else None
    posts = load_legacy_posts(json_file)
    print(f"\nLoaded {len(posts)} legacy posts from {json_file or 'bundled defaults'}")

    app = create_app()
    with app.app_context():
        db.create_all()
        results = migrate_posts(posts)

    print("\n" + "=" * 60)
    print(f"Migration completed: {results['added']} added, {results['skipped']} skipped")
    print("=" * 60)


if __name__ == '__main__':
    main()
