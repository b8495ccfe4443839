"""
Blogs Module - CRUD access to the blogs table plus published-post queries
"""

from models import Blog
from .data import (
    list_records, get_record, create_record, update_record, delete_record
)
from .helpers import slugify

BLOG_FIELDS = {
    'title': 'title',
    'slug': 'slug',
    'excerpt': 'excerpt',
    'content': 'content',
    'author': 'author',
    'tags': 'tags',
    'coverImage': 'cover_image',
    'published': 'published',
}
REQUIRED_BLOG_FIELDS = ('title', 'excerpt', 'content', 'author')


def get_blogs():
    """All posts including drafts, newest first"""
    return list_records(Blog, BLOG_FIELDS, Blog.created_at.desc())


def get_published_blogs():
    return [b for b in get_blogs() if b['published']]


def get_blog_by_id(blog_id):
    return get_record(Blog, BLOG_FIELDS, blog_id)


def get_blog_by_slug(slug):
    """Published post by slug; drafts are never exposed through their slug"""
    blog = Blog.query.filter_by(slug=slug, published=True).first()
    return get_record(Blog, BLOG_FIELDS, blog.id) if blog else None


def has_tag(blog, tag):
    """Case-insensitive tag membership"""
    wanted = tag.lower()
    return any(t.lower() == wanted for t in blog['tags'])


def get_blogs_by_tag(tag):
    return search_blogs(get_published_blogs(), tag=tag)


def get_related_blogs(blog, limit=3):
    """Other published posts sharing at least one tag with ``blog``, newest first"""
    related = [
        b for b in get_published_blogs()
        if b['id'] != blog['id'] and any(has_tag(b, tag) for tag in blog['tags'])
    ]
    return related[:limit]


def get_all_tags(blogs):
    """Distinct tags in first-seen order"""
    tags = []
    for blog in blogs:
        for tag in blog['tags']:
            if tag not in tags:
                tags.append(tag)
    return tags


def search_blogs(blogs, query=None, tag=None):
    """Filter posts by a free-text query and/or a tag (both case-insensitive)"""
    result = blogs
    if query:
        needle = query.lower()
        result = [
            b for b in result
            if needle in b['title'].lower()
            or needle in b['excerpt'].lower()
            or needle in b['content'].lower()
        ]
    if tag and tag != 'All':
        result = [b for b in result if has_tag(b, tag)]
    return result


def create_blog(values):
    values = dict(values)
    if not str(values.get('slug') or '').strip():
        values['slug'] = slugify(str(values.get('title') or ''))
    return create_record(Blog, BLOG_FIELDS, values)


def update_blog(blog_id, values):
    return update_record(Blog, BLOG_FIELDS, blog_id, values)


def delete_blog(blog_id):
    return delete_record(Blog, blog_id)
