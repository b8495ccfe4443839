"""
Experiences Module - CRUD access to the experiences table
"""

from models import Experience
from .data import (
    list_records, get_record, create_record, update_record, delete_record
)

EXPERIENCE_FIELDS = {
    'title': 'title',
    'company': 'company',
    'location': 'location',
    'startDate': 'start_date',
    'endDate': 'end_date',
    'current': 'current',
    'description': 'description',
    'responsibilities': 'responsibilities',
}
REQUIRED_EXPERIENCE_FIELDS = ('title', 'company', 'location', 'startDate', 'description')


def get_experiences():
    """Current positions first, then latest start date first"""
    return list_records(
        Experience, EXPERIENCE_FIELDS,
        Experience.current.desc(), Experience.start_date.desc()
    )


def get_experience_by_id(experience_id):
    return get_record(Experience, EXPERIENCE_FIELDS, experience_id)


def create_experience(values):
    return create_record(Experience, EXPERIENCE_FIELDS, values)


def update_experience(experience_id, values):
    return update_record(Experience, EXPERIENCE_FIELDS, experience_id, values)


def delete_experience(experience_id):
    return delete_record(Experience, experience_id)
