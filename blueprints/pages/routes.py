"""
Pages Routes - Public portfolio and blog pages
"""

from datetime import datetime
from flask import render_template, request, current_app, abort, url_for
from utils.helpers import get_site_profile
from utils.projects import get_projects, get_featured_projects, filter_projects_by_technology
from utils.blogs import (
    get_published_blogs, get_blog_by_slug, get_related_blogs, search_blogs, get_all_tags
)
from utils.experiences import get_experiences
from . import pages_bp


@pages_bp.route('/')
def index():
    """Portfolio home - hero, about, skills, projects, experience, latest posts"""
    projects = get_featured_projects() or get_projects()
    return render_template('index.html',
                           profile=get_site_profile(current_app.config),
                           projects=projects,
                           experiences=get_experiences(),
                           latest_posts=get_published_blogs()[:3])


@pages_bp.route('/projects')
def projects():
    """All projects with an optional technology filter"""
    all_projects = get_projects()
    technologies = sorted({t for p in all_projects for t in p['technologies']})
    selected = request.args.get('tech', '').strip()
    return render_template('projects.html',
                           projects=filter_projects_by_technology(all_projects, selected),
                           technologies=technologies,
                           selected_tech=selected)


@pages_bp.route('/blog')
def blog():
    """Published posts with search and tag filter"""
    posts = get_published_blogs()
    query = request.args.get('q', '').strip()
    tag = request.args.get('tag', 'All').strip() or 'All'
    return render_template('blog/list.html',
                           posts=search_blogs(posts, query, tag),
                           tags=['All'] + get_all_tags(posts),
                           query=query,
                           selected_tag=tag)


@pages_bp.route('/blog/<slug>')
def blog_post(slug):
    """Single published post with related reading"""
    post = get_blog_by_slug(slug)
    if not post:
        abort(404)
    return render_template('blog/post.html',
                           post=post,
                           related_posts=get_related_blogs(post))


@pages_bp.route('/sitemap.xml')
def sitemap():
    """Generate dynamic sitemap for SEO"""
    base_url = request.url_root.rstrip('/')
    today = datetime.now().strftime('%Y-%m-%d')

    sitemap_entries = [
        {'loc': f'{base_url}/', 'changefreq': 'weekly', 'priority': '1.0', 'lastmod': today},
        {'loc': f'{base_url}/projects', 'changefreq': 'monthly', 'priority': '0.8', 'lastmod': today},
        {'loc': f'{base_url}/blog', 'changefreq': 'weekly', 'priority': '0.9', 'lastmod': today},
    ]

    for post in get_published_blogs():
        sitemap_entries.append({
            'loc': base_url + url_for('pages.blog_post', slug=post['slug']),
            'changefreq': 'monthly',
            'priority': '0.7',
            'lastmod': (post['updatedAt'] or today)[:10]
        })

    sitemap_xml = ['<?xml version="1.0" encoding="UTF-8"?>']
    sitemap_xml.append('<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">')

    for entry in sitemap_entries:
        sitemap_xml.append('<url>')
        sitemap_xml.append(f'<loc>{entry["loc"]}</loc>')
        sitemap_xml.append(f'<lastmod>{entry["lastmod"]}</lastmod>')
        sitemap_xml.append(f'<changefreq>{entry["changefreq"]}</changefreq>')
        sitemap_xml.append(f'<priority>{entry["priority"]}</priority>')
        sitemap_xml.append('</url>')

    sitemap_xml.append('</urlset>')

    response = current_app.make_response('\n'.join(sitemap_xml))
    response.headers['Content-Type'] = 'application/xml; charset=utf-8'
    return response


@pages_bp.route('/robots.txt')
def robots():
    """Generate robots.txt for SEO"""
    robots_txt = """User-agent: *
Allow: /
Allow: /blog/
Allow: /projects
Disallow: /dashboard/
Disallow: /login
Disallow: /api/

Sitemap: """ + request.url_root.rstrip('/') + "/sitemap.xml"

    response = current_app.make_response(robots_txt)
    response.headers['Content-Type'] = 'text/plain; charset=utf-8'
    return response
