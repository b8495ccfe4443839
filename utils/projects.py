"""
Projects Module - CRUD access to the projects table
"""

from models import Project
from .data import (
    list_records, get_record, create_record, update_record, delete_record
)

PROJECT_FIELDS = {
    'title': 'title',
    'description': 'description',
    'technologies': 'technologies',
    'imageUrl': 'image_url',
    'liveUrl': 'live_url',
    'githubUrl': 'github_url',
    'featured': 'featured',
}
REQUIRED_PROJECT_FIELDS = ('title', 'description')


def get_projects():
    """All projects, newest first"""
    return list_records(Project, PROJECT_FIELDS, Project.created_at.desc())


def get_featured_projects():
    return [p for p in get_projects() if p['featured']]


def get_project_by_id(project_id):
    return get_record(Project, PROJECT_FIELDS, project_id)


def create_project(values):
    return create_record(Project, PROJECT_FIELDS, values)


def update_project(project_id, values):
    return update_record(Project, PROJECT_FIELDS, project_id, values)


def delete_project(project_id):
    return delete_record(Project, project_id)


def filter_projects_by_technology(projects, technology):
    """Projects using a technology (case-insensitive)"""
    if not technology:
        return projects
    wanted = technology.lower()
    return [p for p in projects if any(t.lower() == wanted for t in p['technologies'])]
