"""
Seed Module - Starter content for an empty portfolio
"""

from flask import current_app
from extensions import db
from models import Project, Experience
from .data import count_records
from .projects import create_project
from .experiences import create_experience


STARTER_PROJECTS = [
    {
        'title': 'Placement Notifier System',
        'description': (
            'A placement management system that streamlines the recruitment process '
            'with automated email notifications, Excel parsing for bulk student uploads '
            'and filtering based on CGPA and skills.'
        ),
        'technologies': ['Next.js', 'FastAPI', 'TypeScript', 'Python'],
        'imageUrl': 'https://images.unsplash.com/photo-1523240795612-9a054b0db644?q=80&w=1000&auto=format&fit=crop',
        'githubUrl': 'https://github.com/aman124598/placement_notifier.git',
        'featured': True,
    },
    {
        'title': 'Location Based Attendance System',
        'description': (
            'An attendance tracking solution that uses geolocation and AI-powered '
            'validation to verify teacher presence, replacing manual registers.'
        ),
        'technologies': ['React', 'Express.js', 'MongoDB', 'Gemini API'],
        'imageUrl': 'https://images.unsplash.com/photo-1576267423445-b2e0074d68a4?q=80&w=1000&auto=format&fit=crop',
        'githubUrl': 'https://github.com/aman124598/attendence.git',
        'featured': True,
    },
    {
        'title': 'Water Delivery Ecommerce Platform',
        'description': (
            'A multi-vendor e-commerce platform for water delivery with an ad-supported '
            'model that lets users waive delivery fees, plus real-time order tracking.'
        ),
        'technologies': ['React', 'Supabase'],
        'imageUrl': 'https://images.unsplash.com/photo-1543165796-5426273eaab3?q=80&w=1000&auto=format&fit=crop',
        'githubUrl': 'https://github.com/aman124598/AquaFlow.git',
        'featured': True,
    },
]

STARTER_EXPERIENCES = [
    {
        'title': 'Cybersecurity Intern',
        'company': 'CFSS Cyber and Forensics Security Solutions',
        'location': 'Bangalore',
        'startDate': '2024-03',
        'endDate': '2024-04',
        'current': False,
        'description': 'Internship focused on cybersecurity and penetration testing',
        'responsibilities': [
            'Performed vulnerability testing with tools like Nmap, Wireshark, and Burp Suite',
            'Practiced ethical hacking and security assessment methodologies in real-world environments',
            'Gained hands-on experience with penetration testing frameworks and security protocols',
        ],
    },
]


def init_db():
    """Create any missing tables"""
    db.create_all()
    current_app.logger.info("✓ Database tables created")


def seed_content():
    """
    Insert starter projects and experiences into empty tables.

    A table that already holds rows is left untouched.

    Returns:
        dict: {'projects': {'added', 'skipped'}, 'experiences': {...}}
    """
    results = {
        'projects': {'added': 0, 'skipped': False},
        'experiences': {'added': 0, 'skipped': False},
    }

    if count_records(Project) == 0:
        for project in STARTER_PROJECTS:
            create_project(project)
            results['projects']['added'] += 1
    else:
        results['projects']['skipped'] = True

    if count_records(Experience) == 0:
        for experience in STARTER_EXPERIENCES:
            create_experience(experience)
            results['experiences']['added'] += 1
    else:
        results['experiences']['skipped'] = True

    current_app.logger.info(f"Seed completed: {results}")
    return results
