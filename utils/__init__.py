"""
Utils Package - Centralized utility modules initialization
"""

from .decorators import login_required, api_login_required
from .data import (
    list_records,
    get_record,
    create_record,
    update_record,
    delete_record,
    missing_fields
)
from .security import (
    AdminUser,
    get_client_ip,
    get_admin_credentials,
    verify_password,
    authenticate,
    create_token,
    verify_token
)
from .helpers import split_list, parse_bool, slugify, read_time, form_values, get_site_profile

__all__ = [
    # Decorators
    'login_required',
    'api_login_required',

    # Data
    'list_records',
    'get_record',
    'create_record',
    'update_record',
    'delete_record',
    'missing_fields',

    # Security
    'AdminUser',
    'get_client_ip',
    'get_admin_credentials',
    'verify_password',
    'authenticate',
    'create_token',
    'verify_token',

    # Helpers
    'split_list',
    'parse_bool',
    'slugify',
    'read_time',
    'form_values',
    'get_site_profile'
]
