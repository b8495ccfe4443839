"""
Dashboard Routes - Admin content management
Handles: Overview, and list/add/edit/delete pages for projects, blogs and experiences
"""

from flask import render_template, redirect, url_for, request, flash, current_app
from sqlalchemy.exc import SQLAlchemyError
from extensions import db
from utils.data import missing_fields
from utils.decorators import login_required
from utils.helpers import form_values
from utils.projects import (
    get_projects, get_project_by_id, create_project, update_project,
    delete_project, REQUIRED_PROJECT_FIELDS
)
from utils.blogs import (
    get_blogs, get_blog_by_id, create_blog, update_blog, delete_blog,
    REQUIRED_BLOG_FIELDS
)
from utils.experiences import (
    get_experiences, get_experience_by_id, create_experience,
    update_experience, delete_experience, REQUIRED_EXPERIENCE_FIELDS
)
from . import dashboard_bp


PROJECT_FORM = {'list_fields': ('technologies',), 'bool_fields': ('featured',)}
BLOG_FORM = {'list_fields': ('tags',), 'bool_fields': ('published',)}
EXPERIENCE_FORM = {'line_fields': ('responsibilities',), 'bool_fields': ('current',)}


def _save_failed(action, label, error):
    db.session.rollback()
    current_app.logger.error(f"Dashboard {action} {label} error: {str(error)}")
    flash(f'Could not {action} {label}. Please try again.', 'error')


@dashboard_bp.route('/')
@login_required
def index():
    """Overview with content statistics"""
    projects = get_projects()
    blogs = get_blogs()
    experiences = get_experiences()

    stats = {
        'total_projects': len(projects),
        'featured_projects': sum(1 for p in projects if p['featured']),
        'published_blogs': sum(1 for b in blogs if b['published']),
        'draft_blogs': sum(1 for b in blogs if not b['published']),
        'total_experiences': len(experiences),
    }

    return render_template('dashboard/index.html',
                           stats=stats,
                           recent_projects=projects[:5],
                           recent_blogs=blogs[:5])


# ---------------------------------------------------------------- Projects

@dashboard_bp.route('/projects')
@login_required
def projects():
    """List all projects"""
    return render_template('dashboard/projects.html', projects=get_projects())


@dashboard_bp.route('/projects/new', methods=['GET', 'POST'])
@login_required
def add_project():
    """Add new project"""
    if request.method == 'POST':
        values = form_values(request.form, **PROJECT_FORM)
        missing = missing_fields(values, REQUIRED_PROJECT_FIELDS)
        if missing:
            flash(f"Required fields missing: {', '.join(missing)}", 'error')
            return render_template('dashboard/project_form.html', project=values), 400
        try:
            create_project(values)
        except SQLAlchemyError as e:
            _save_failed('add', 'project', e)
            return render_template('dashboard/project_form.html', project=values), 500
        flash('Project added successfully', 'success')
        return redirect(url_for('dashboard.projects'))

    return render_template('dashboard/project_form.html', project=None)


@dashboard_bp.route('/projects/<project_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_project(project_id):
    """Edit existing project"""
    project = get_project_by_id(project_id)
    if not project:
        flash('Project not found', 'error')
        return redirect(url_for('dashboard.projects'))

    if request.method == 'POST':
        try:
            update_project(project_id, form_values(request.form, **PROJECT_FORM))
        except SQLAlchemyError as e:
            _save_failed('update', 'project', e)
            return render_template('dashboard/project_form.html', project=project), 500
        flash('Project updated successfully', 'success')
        return redirect(url_for('dashboard.projects'))

    return render_template('dashboard/project_form.html', project=project)


@dashboard_bp.route('/projects/<project_id>/delete', methods=['POST'])
@login_required
def remove_project(project_id):
    """Delete project"""
    try:
        if delete_project(project_id):
            flash('Project deleted successfully', 'success')
        else:
            flash('Project not found', 'error')
    except SQLAlchemyError as e:
        _save_failed('delete', 'project', e)
    return redirect(url_for('dashboard.projects'))


# ------------------------------------------------------------------- Blogs

@dashboard_bp.route('/blogs')
@login_required
def blogs():
    """List all posts, drafts included"""
    return render_template('dashboard/blogs.html', blogs=get_blogs())


@dashboard_bp.route('/blogs/new', methods=['GET', 'POST'])
@login_required
def add_blog():
    """Write a new post"""
    if request.method == 'POST':
        values = form_values(request.form, **BLOG_FORM)
        missing = missing_fields(values, REQUIRED_BLOG_FIELDS)
        if missing:
            flash(f"Required fields missing: {', '.join(missing)}", 'error')
            return render_template('dashboard/blog_form.html', blog=values), 400
        try:
            create_blog(values)
        except SQLAlchemyError as e:
            _save_failed('add', 'blog post', e)
            return render_template('dashboard/blog_form.html', blog=values), 500
        flash('Blog post created successfully', 'success')
        return redirect(url_for('dashboard.blogs'))

    return render_template('dashboard/blog_form.html', blog=None)


@dashboard_bp.route('/blogs/<blog_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_blog(blog_id):
    """Edit existing post"""
    blog = get_blog_by_id(blog_id)
    if not blog:
        flash('Blog post not found', 'error')
        return redirect(url_for('dashboard.blogs'))

    if request.method == 'POST':
        try:
            update_blog(blog_id, form_values(request.form, **BLOG_FORM))
        except SQLAlchemyError as e:
            _save_failed('update', 'blog post', e)
            return render_template('dashboard/blog_form.html', blog=blog), 500
        flash('Blog post updated successfully', 'success')
        return redirect(url_for('dashboard.blogs'))

    return render_template('dashboard/blog_form.html', blog=blog)


@dashboard_bp.route('/blogs/<blog_id>/delete', methods=['POST'])
@login_required
def remove_blog(blog_id):
    """Delete post"""
    try:
        if delete_blog(blog_id):
            flash('Blog post deleted successfully', 'success')
        else:
            flash('Blog post not found', 'error')
    except SQLAlchemyError as e:
        _save_failed('delete', 'blog post', e)
    return redirect(url_for('dashboard.blogs'))


# ------------------------------------------------------------- Experiences

@dashboard_bp.route('/experiences')
@login_required
def experiences():
    """List work experience"""
    return render_template('dashboard/experiences.html', experiences=get_experiences())


@dashboard_bp.route('/experiences/new', methods=['GET', 'POST'])
@login_required
def add_experience():
    """Add work experience"""
    if request.method == 'POST':
        values = form_values(request.form, **EXPERIENCE_FORM)
        missing = missing_fields(values, REQUIRED_EXPERIENCE_FIELDS)
        if missing:
            flash(f"Required fields missing: {', '.join(missing)}", 'error')
            return render_template('dashboard/experience_form.html', experience=values), 400
        try:
            create_experience(values)
        except SQLAlchemyError as e:
            _save_failed('add', 'experience', e)
            return render_template('dashboard/experience_form.html', experience=values), 500
        flash('Experience added successfully', 'success')
        return redirect(url_for('dashboard.experiences'))

    return render_template('dashboard/experience_form.html', experience=None)


@dashboard_bp.route('/experiences/<experience_id>/edit', methods=['GET', 'POST'])
@login_required
def edit_experience(experience_id):
    """Edit work experience"""
    experience = get_experience_by_id(experience_id)
    if not experience:
        flash('Experience not found', 'error')
        return redirect(url_for('dashboard.experiences'))

    if request.method == 'POST':
        try:
            update_experience(experience_id, form_values(request.form, **EXPERIENCE_FORM))
        except SQLAlchemyError as e:
            _save_failed('update', 'experience', e)
            return render_template('dashboard/experience_form.html', experience=experience), 500
        flash('Experience updated successfully', 'success')
        return redirect(url_for('dashboard.experiences'))

    return render_template('dashboard/experience_form.html', experience=experience)


@dashboard_bp.route('/experiences/<experience_id>/delete', methods=['POST'])
@login_required
def remove_experience(experience_id):
    """Delete work experience"""
    try:
        if delete_experience(experience_id):
            flash('Experience deleted successfully', 'success')
        else:
            flash('Experience not found', 'error')
    except SQLAlchemyError as e:
        _save_failed('delete', 'experience', e)
    return redirect(url_for('dashboard.experiences'))
