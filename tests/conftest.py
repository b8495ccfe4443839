import pytest
from app import create_app


@pytest.fixture()
def app():
    """Flask app on an in-memory SQLite database"""
    app = create_app('testing')
    yield app


@pytest.fixture()
def client(app):
    """Anonymous visitor"""
    return app.test_client()


@pytest.fixture()
def admin_client(app):
    """Test client holding a valid admin token cookie"""
    client = app.test_client()
    resp = client.post('/api/auth/login', json={'username': 'admin', 'password': 'admin123'})
    assert resp.status_code == 200
    return client


@pytest.fixture()
def app_ctx(app):
    """Application context for calling the data layer directly"""
    with app.app_context():
        yield app


@pytest.fixture()
def project_payload():
    return {
        'title': 'Placement Notifier',
        'description': 'Recruitment notifications for students',
        'technologies': ['Next.js', 'FastAPI'],
        'githubUrl': 'https://github.com/example/placement',
        'featured': True,
    }


@pytest.fixture()
def blog_payload():
    return {
        'title': 'The Art of Clean Code',
        'excerpt': 'Readable code matters',
        'content': 'Clean code is about making intent obvious.',
        'author': 'Aman',
        'tags': ['development'],
        'published': True,
    }


@pytest.fixture()
def experience_payload():
    return {
        'title': 'Cybersecurity Intern',
        'company': 'CFSS',
        'location': 'Bangalore',
        'startDate': '2024-03',
        'endDate': '2024-04',
        'current': False,
        'description': 'Penetration testing internship',
        'responsibilities': ['Ran Nmap scans', 'Reviewed Burp Suite findings'],
    }
