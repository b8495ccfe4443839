from extensions import db
from datetime import datetime
from sqlalchemy import JSON
import random
import string
import time

# Custom JSON type that uses JSONB on PostgreSQL and JSON/Text on SQLite
class SafeJSON(db.TypeDecorator):
    impl = JSON
    cache_ok = True

    def load_dialect_impl(self, dialect):
        if dialect.name == 'postgresql':
            from sqlalchemy.dialects.postgresql import JSONB
            return dialect.type_descriptor(JSONB())
        else:
            return dialect.type_descriptor(JSON())


def generate_id():
    """Millisecond timestamp id with a short random suffix"""
    suffix = ''.join(random.choices(string.ascii_lowercase + string.digits, k=6))
    return f"{int(time.time() * 1000)}{suffix}"


class Project(db.Model):
    __tablename__ = 'projects'
    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text, nullable=False)
    technologies = db.Column(SafeJSON, nullable=False, default=list)
    image_url = db.Column(db.String(500))
    live_url = db.Column(db.String(500))
    github_url = db.Column(db.String(500))
    featured = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)


class Blog(db.Model):
    __tablename__ = 'blogs'
    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    title = db.Column(db.String(255), nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    excerpt = db.Column(db.Text, nullable=False)
    content = db.Column(db.Text, nullable=False)
    author = db.Column(db.String(255), nullable=False)
    tags = db.Column(SafeJSON, nullable=False, default=list)
    cover_image = db.Column(db.String(500))
    published = db.Column(db.Boolean, default=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)


class Experience(db.Model):
    __tablename__ = 'experiences'
    id = db.Column(db.String(36), primary_key=True, default=generate_id)
    title = db.Column(db.String(255), nullable=False)
    company = db.Column(db.String(255), nullable=False)
    location = db.Column(db.String(255), nullable=False)
    start_date = db.Column(db.String(20), nullable=False)  # YYYY-MM or YYYY-MM-DD
    end_date = db.Column(db.String(20))
    current = db.Column(db.Boolean, default=False)
    description = db.Column(db.Text, nullable=False)
    responsibilities = db.Column(SafeJSON, nullable=False, default=list)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow)
