"""
Data-access layer, form helpers, seeding and the legacy blog import.
"""

import pytest
from sqlalchemy import inspect
from werkzeug.datastructures import MultiDict

from extensions import db
from models import Blog, Project, Experience
from utils.data import count_records, missing_fields, to_iso_utc
from utils.helpers import split_list, parse_bool, slugify, read_time, form_values, get_site_profile
from utils.projects import create_project, update_project, get_project_by_id, delete_project
from utils.blogs import (
    create_blog, get_blog_by_slug, get_blogs_by_tag, get_related_blogs, get_all_tags,
    search_blogs
)
from utils.experiences import create_experience, get_experiences
from utils.seed import seed_content, STARTER_PROJECTS
from migrations.migrate_legacy_blogs import (
    DEFAULT_LEGACY_POSTS, legacy_post_to_blog, migrate_posts, parse_date
)


POSTS = [
    {'title': 'Clean Code', 'excerpt': 'Readability', 'content': 'DRY and KISS',
     'tags': ['development']},
    {'title': 'Security Trends', 'excerpt': 'Zero trust', 'content': 'AI attacks',
     'tags': ['cybersecurity', 'development']},
    {'title': 'My Journey', 'excerpt': 'Hello world', 'content': 'From HTML to Next.js',
     'tags': ['personal']},
]


@pytest.mark.data
def test_split_list():
    assert split_list('React, Flask ,, SQL ') == ['React', 'Flask', 'SQL']
    assert split_list('one\r\n\r\ntwo\n', separator='\n') == ['one', 'two']
    assert split_list('') == []
    assert split_list(None) == []


@pytest.mark.data
@pytest.mark.parametrize('value, expected', [
    (True, True), (False, False), ('on', True), ('true', True), ('1', True),
    ('false', False), ('', False), (0, False), (1, True),
])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected


@pytest.mark.data
def test_slugify():
    assert slugify('The Art of Clean Code') == 'the-art-of-clean-code'
    assert slugify("  Cybersecurity Trends 2025! ") == 'cybersecurity-trends-2025'
    assert slugify('') == ''


@pytest.mark.data
def test_form_values_makes_checkboxes_explicit():
    form = MultiDict({'title': ' Tool ', 'technologies': 'Flask, Jinja'})
    values = form_values(form, list_fields=('technologies',), bool_fields=('featured',))
    assert values == {'title': 'Tool', 'technologies': ['Flask', 'Jinja'], 'featured': False}


@pytest.mark.data
def test_missing_fields_treats_blank_as_missing():
    assert missing_fields({'title': '  ', 'description': 'x'}, ('title', 'description')) == ['title']
    assert missing_fields({}, ('title',)) == ['title']


@pytest.mark.data
def test_search_blogs():
    assert [b['title'] for b in search_blogs(POSTS, 'zero')] == ['Security Trends']
    assert [b['title'] for b in search_blogs(POSTS, 'next.JS')] == ['My Journey']
    assert len(search_blogs(POSTS, tag='development')) == 2
    assert [b['title'] for b in search_blogs(POSTS, 'ai', 'development')] == ['Security Trends']
    assert search_blogs(POSTS, '', 'All') == POSTS
    assert search_blogs(POSTS, 'nothing matches') == []


@pytest.mark.data
def test_get_all_tags_keeps_first_seen_order():
    assert get_all_tags(POSTS) == ['development', 'cybersecurity', 'personal']


@pytest.mark.data
def test_merge_update(app_ctx, project_payload):
    created = create_project(project_payload)
    updated = update_project(created['id'], {
        'description': '', 'liveUrl': 'https://example.com', 'technologies': 'Flask, Vue',
    })
    assert updated['description'] == project_payload['description']
    assert updated['liveUrl'] == 'https://example.com'
    assert updated['technologies'] == ['Flask', 'Vue']
    assert get_project_by_id(created['id']) == updated


@pytest.mark.data
def test_update_and_delete_unknown_id(app_ctx):
    assert update_project('missing', {'title': 'x'}) is None
    assert delete_project('missing') is False


@pytest.mark.data
def test_blog_by_slug_and_tag(app_ctx, blog_payload):
    create_blog(blog_payload)
    create_blog({**blog_payload, 'title': 'Hidden', 'tags': ['Development'], 'published': False})

    assert get_blog_by_slug('the-art-of-clean-code')['title'] == 'The Art of Clean Code'
    assert get_blog_by_slug('hidden') is None
    assert [b['title'] for b in get_blogs_by_tag('DEVELOPMENT')] == ['The Art of Clean Code']
    assert count_records(Blog, published=False) == 1


@pytest.mark.data
def test_experience_ordering(app_ctx, experience_payload):
    create_experience({**experience_payload, 'title': 'A', 'startDate': '2022-01'})
    create_experience({**experience_payload, 'title': 'B', 'startDate': '2024-01'})
    create_experience({**experience_payload, 'title': 'C', 'startDate': '2019-01', 'current': True})
    assert [e['title'] for e in get_experiences()] == ['C', 'B', 'A']


@pytest.mark.data
def test_seed_only_fills_empty_tables(app_ctx, experience_payload):
    create_experience(experience_payload)

    results = seed_content()
    assert results['projects'] == {'added': len(STARTER_PROJECTS), 'skipped': False}
    assert results['experiences'] == {'added': 0, 'skipped': True}
    assert count_records(Experience) == 1

    again = seed_content()
    assert again['projects'] == {'added': 0, 'skipped': True}
    assert count_records(Project) == len(STARTER_PROJECTS)


@pytest.mark.data
def test_seed_endpoint_requires_admin(client, admin_client):
    assert client.post('/api/seed').status_code == 401
    resp = admin_client.post('/api/seed')
    assert resp.status_code == 200
    assert resp.get_json()['results']['projects']['added'] == len(STARTER_PROJECTS)


@pytest.mark.data
def test_parse_date():
    assert parse_date('2025-01-15').year == 2025
    assert parse_date('2025-01-15T10:30:00').hour == 10
    assert parse_date('15/01/2025') is None
    assert parse_date(None) is None


@pytest.mark.data
def test_legacy_post_to_blog():
    values = legacy_post_to_blog(DEFAULT_LEGACY_POSTS[1])
    assert values['id'] == '2'
    assert values['slug'] == 'cybersecurity-trends-2025'
    assert values['excerpt'] == DEFAULT_LEGACY_POSTS[1]['description']
    assert values['tags'] == ['cybersecurity']
    assert values['published'] is True
    assert values['created_at'] == values['updated_at']


@pytest.mark.data
def test_migrate_posts_skips_existing(app_ctx):
    first = migrate_posts(DEFAULT_LEGACY_POSTS)
    assert first == {'added': len(DEFAULT_LEGACY_POSTS), 'skipped': 0}

    second = migrate_posts(DEFAULT_LEGACY_POSTS)
    assert second == {'added': 0, 'skipped': len(DEFAULT_LEGACY_POSTS)}
    assert get_blog_by_slug('my-learning-journey')['author'] == 'Aman'


@pytest.mark.data
@pytest.mark.parametrize('content, expected', [
    ('', '1 min read'),
    ('word ' * 200, '1 min read'),
    ('word ' * 201, '2 min read'),
    ('word\n' * 1000, '5 min read'),
])
def test_read_time(content, expected):
    assert read_time(content) == expected


@pytest.mark.data
def test_search_blogs_tag_ignores_case():
    assert [b['title'] for b in search_blogs(POSTS, tag='PERSONAL')] == ['My Journey']


@pytest.mark.data
def test_related_blogs_share_a_tag(app_ctx, blog_payload):
    post = create_blog(blog_payload)
    sibling = create_blog({**blog_payload, 'title': 'Refactoring Legacy Code', 'tags': ['Development']})
    create_blog({**blog_payload, 'title': 'Travel Notes', 'tags': ['personal']})
    create_blog({**blog_payload, 'title': 'Unpublished Sibling', 'published': False})

    related = get_related_blogs(post)
    assert [b['id'] for b in related] == [sibling['id']]


@pytest.mark.data
def test_related_blogs_respects_limit(app_ctx, blog_payload):
    post = create_blog(blog_payload)
    for n in range(5):
        create_blog({**blog_payload, 'title': f'Clean Code Part {n}'})
    assert len(get_related_blogs(post)) == 3
    assert len(get_related_blogs(post, limit=1)) == 1
    assert get_related_blogs({**post, 'tags': []}) == []


@pytest.mark.data
def test_site_profile_contact_links(app):
    profile = get_site_profile(app.config)
    assert profile['email'] == app.config['CONTACT_EMAIL']
    assert [s['name'] for s in profile['socials']] == ['Twitter', 'LinkedIn', 'GitHub']

    app.config['TWITTER_URL'] = ''
    assert 'Twitter' not in [s['name'] for s in get_site_profile(app.config)['socials']]


@pytest.mark.data
def test_init_db_endpoint_creates_tables(app, admin_client):
    with app.app_context():
        db.drop_all()
        assert inspect(db.engine).get_table_names() == []

    resp = admin_client.post('/api/init-db')
    assert resp.status_code == 200
    assert resp.get_json() == {'message': 'Database initialized successfully'}

    with app.app_context():
        tables = set(inspect(db.engine).get_table_names())
    assert {'projects', 'blogs', 'experiences'} <= tables


@pytest.mark.data
def test_to_iso_utc():
    from datetime import datetime
    assert to_iso_utc(datetime(2025, 1, 15, 10, 30, 0, 123456)) == '2025-01-15T10:30:00.123Z'
    assert to_iso_utc(None) is None
