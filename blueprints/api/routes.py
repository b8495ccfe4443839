"""
API Routes - JSON CRUD for projects, blogs and experiences
Collections live at /api/<entity>, single rows at /api/<entity>/<id>.
Reads are public; writes require the admin token cookie.
"""

from flask import request, jsonify, current_app
from flask_login import current_user
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from utils.data import missing_fields
from utils.decorators import api_login_required
from utils.helpers import parse_bool
from utils.projects import (
    get_projects, get_project_by_id, create_project, update_project,
    delete_project, filter_projects_by_technology, REQUIRED_PROJECT_FIELDS
)
from utils.blogs import (
    get_blogs, get_published_blogs, get_blog_by_id, create_blog, update_blog,
    delete_blog, search_blogs, REQUIRED_BLOG_FIELDS
)
from utils.experiences import (
    get_experiences, get_experience_by_id, create_experience, update_experience,
    delete_experience, REQUIRED_EXPERIENCE_FIELDS
)
from utils.seed import init_db, seed_content
from . import api_bp


def _storage_error(action, label, error):
    """Roll back and answer with a generic 500"""
    db.session.rollback()
    current_app.logger.error(f"{action.capitalize()} {label} error: {str(error)}")
    return jsonify({'error': f'Failed to {action} {label}'}), 500


def _read_payload():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else None


def _handle_create(create_fn, required, label):
    payload = _read_payload()
    if payload is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    missing = missing_fields(payload, required)
    if missing:
        return jsonify({'error': f"Missing required fields: {', '.join(missing)}"}), 400

    try:
        entity = create_fn(payload)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except SQLAlchemyError as e:
        return _storage_error('create', label, e)
    return jsonify(entity), 201


def _handle_get(get_fn, record_id, label):
    try:
        entity = get_fn(record_id)
    except SQLAlchemyError as e:
        return _storage_error('fetch', label, e)
    if not entity:
        return jsonify({'error': f'{label.capitalize()} not found'}), 404
    return jsonify(entity)


def _handle_update(update_fn, record_id, label):
    payload = _read_payload()
    if payload is None:
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    try:
        entity = update_fn(record_id, payload)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400
    except SQLAlchemyError as e:
        return _storage_error('update', label, e)
    if not entity:
        return jsonify({'error': f'{label.capitalize()} not found'}), 404
    return jsonify(entity)


def _handle_delete(delete_fn, record_id, label):
    try:
        deleted = delete_fn(record_id)
    except SQLAlchemyError as e:
        return _storage_error('delete', label, e)
    if not deleted:
        return jsonify({'error': f'{label.capitalize()} not found'}), 404
    return jsonify({'success': True})


# ---------------------------------------------------------------- Projects

@api_bp.route('/projects', methods=['GET'])
def list_projects():
    try:
        projects = get_projects()
    except SQLAlchemyError as e:
        return _storage_error('fetch', 'projects', e)

    if parse_bool(request.args.get('featured', 'false')):
        projects = [p for p in projects if p['featured']]
    projects = filter_projects_by_technology(projects, request.args.get('tech'))
    return jsonify(projects)


@api_bp.route('/projects', methods=['POST'])
@api_login_required
def add_project():
    return _handle_create(create_project, REQUIRED_PROJECT_FIELDS, 'project')


@api_bp.route('/projects/<project_id>', methods=['GET'])
def get_project(project_id):
    return _handle_get(get_project_by_id, project_id, 'project')


@api_bp.route('/projects/<project_id>', methods=['PUT'])
@api_login_required
def edit_project(project_id):
    return _handle_update(update_project, project_id, 'project')


@api_bp.route('/projects/<project_id>', methods=['DELETE'])
@api_login_required
def remove_project(project_id):
    return _handle_delete(delete_project, project_id, 'project')


# ------------------------------------------------------------------- Blogs

@api_bp.route('/blogs', methods=['GET'])
def list_blogs():
    """Published posts for visitors; the admin also sees drafts"""
    try:
        blogs = get_blogs() if current_user.is_authenticated else get_published_blogs()
    except SQLAlchemyError as e:
        return _storage_error('fetch', 'blogs', e)

    blogs = search_blogs(blogs, request.args.get('q'), request.args.get('tag'))
    return jsonify(blogs)


@api_bp.route('/blogs', methods=['POST'])
@api_login_required
def add_blog():
    return _handle_create(create_blog, REQUIRED_BLOG_FIELDS, 'blog')


@api_bp.route('/blogs/<blog_id>', methods=['GET'])
def get_blog(blog_id):
    def visible_blog(record_id):
        blog = get_blog_by_id(record_id)
        if blog and not blog['published'] and not current_user.is_authenticated:
            return None
        return blog

    return _handle_get(visible_blog, blog_id, 'blog')


@api_bp.route('/blogs/<blog_id>', methods=['PUT'])
@api_login_required
def edit_blog(blog_id):
    return _handle_update(update_blog, blog_id, 'blog')


@api_bp.route('/blogs/<blog_id>', methods=['DELETE'])
@api_login_required
def remove_blog(blog_id):
    return _handle_delete(delete_blog, blog_id, 'blog')


# ------------------------------------------------------------- Experiences

@api_bp.route('/experiences', methods=['GET'])
def list_experiences():
    try:
        return jsonify(get_experiences())
    except SQLAlchemyError as e:
        return _storage_error('fetch', 'experiences', e)


@api_bp.route('/experiences', methods=['POST'])
@api_login_required
def add_experience():
    return _handle_create(create_experience, REQUIRED_EXPERIENCE_FIELDS, 'experience')


@api_bp.route('/experiences/<experience_id>', methods=['GET'])
def get_experience(experience_id):
    return _handle_get(get_experience_by_id, experience_id, 'experience')


@api_bp.route('/experiences/<experience_id>', methods=['PUT'])
@api_login_required
def edit_experience(experience_id):
    return _handle_update(update_experience, experience_id, 'experience')


@api_bp.route('/experiences/<experience_id>', methods=['DELETE'])
@api_login_required
def remove_experience(experience_id):
    return _handle_delete(delete_experience, experience_id, 'experience')


# ------------------------------------------------------------- Maintenance

@api_bp.route('/init-db', methods=['POST'])
@api_login_required
def initialize_database():
    try:
        init_db()
    except SQLAlchemyError as e:
        return _storage_error('initialize', 'database', e)
    return jsonify({'message': 'Database initialized successfully'})


@api_bp.route('/seed', methods=['POST'])
@api_login_required
def seed():
    try:
        results = seed_content()
    except SQLAlchemyError as e:
        return _storage_error('seed', 'data', e)
    return jsonify({'success': True, 'message': 'Seed completed', 'results': results})
