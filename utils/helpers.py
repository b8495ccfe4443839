"""
Helpers Module - Utility functions for common operations
"""

import math
import re


def split_list(value, separator=','):
    """Split a delimited string into a list of trimmed, non-empty items"""
    if not value:
        return []
    if separator == '\n':
        parts = value.splitlines()
    else:
        parts = value.split(separator)
    return [part.strip() for part in parts if part.strip()]


def parse_bool(value):
    """Interpret form/JSON values such as 'on', 'true', '1' as booleans"""
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    return str(value).strip().lower() in ('1', 'true', 'on', 'yes')


def slugify(title):
    """URL-safe identifier derived from a title"""
    slug = re.sub(r'[^a-z0-9]+', '-', (title or '').lower())
    return slug.strip('-')


def read_time(content, words_per_minute=200):
    """Reading-time label such as '5 min read'"""
    words = len((content or '').split())
    minutes = max(1, math.ceil(words / words_per_minute))
    return f"{minutes} min read"


def form_values(form, list_fields=(), line_fields=(), bool_fields=()):
    """
    Collect dashboard form input into a payload for the data layer.

    Comma separated inputs become lists, textarea inputs in ``line_fields``
    split one item per line, and checkboxes are always explicit booleans
    because an unchecked box is simply absent from the form.
    """
    values = {}
    for key in form.keys():
        if key in list_fields:
            values[key] = split_list(form.get(key, ''))
        elif key in line_fields:
            values[key] = split_list(form.get(key, ''), separator='\n')
        elif key not in bool_fields:
            values[key] = form.get(key, '').strip()
    for key in bool_fields:
        values[key] = form.get(key) == 'on'
    return values


def get_site_profile(config):
    """Static portfolio content for the hero, about and skills sections"""
    return {
        'name': config.get('SITE_OWNER', ''),
        'title': config.get('SITE_TITLE', ''),
        'about': (
            'I build full-stack web applications with React, Express and MongoDB, '
            'and I am equally passionate about cybersecurity, ethical hacking and '
            'building meaningful, secure solutions.'
        ),
        'skills': {
            'Programming': ['C', 'Python', 'Java', 'HTML', 'CSS', 'JavaScript'],
            'Frameworks & Tools': ['React', 'Next.js', 'Git', 'Tailwind CSS', 'Express.js', 'MongoDB'],
            'Cybersecurity': ['Penetration Testing', 'Vulnerability Analysis', 'Nmap', 'Wireshark', 'Burp Suite'],
            'Soft Skills': ['Communication', 'Problem-Solving', 'Creativity', 'Cooperation'],
            'Languages': ['English', 'Hindi'],
        },
        'email': config.get('CONTACT_EMAIL'),
        'socials': [
            {'name': name, 'label': label, 'url': config.get(key)}
            for name, label, key in (
                ('Twitter', 'Follow me', 'TWITTER_URL'),
                ('LinkedIn', 'Connect with me', 'LINKEDIN_URL'),
                ('GitHub', 'See my code', 'GITHUB_URL'),
            )
            if config.get(key)
        ],
    }
