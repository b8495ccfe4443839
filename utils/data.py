"""
Data Management Module - Generic row access shared by the entity modules
Projects, blogs and experiences all use the same list/get/create/update/delete
pattern; the entity modules describe their fields and delegate here.
"""

from datetime import datetime, timezone
from flask import current_app
from sqlalchemy import Boolean
from extensions import db
from models import SafeJSON
from .helpers import split_list, parse_bool


def _column_kind(model, column_name):
    """Return 'bool', 'list' or 'text' for a model column"""
    column_type = model.__table__.columns[column_name].type
    if isinstance(column_type, Boolean):
        return 'bool'
    if isinstance(column_type, SafeJSON):
        return 'list'
    return 'text'


def normalize_value(model, column_name, value, field=None):
    """
    Coerce an incoming value to the column's kind; None means 'not provided'.

    Raises:
        ValueError: A list column received something other than a string
            or a list of strings
    """
    if value is None:
        return None
    kind = _column_kind(model, column_name)
    if kind == 'bool':
        return parse_bool(value)
    if kind == 'list':
        if isinstance(value, str):
            return split_list(value)
        if not isinstance(value, (list, tuple)) or not all(isinstance(item, str) for item in value):
            raise ValueError(f"{field or column_name} must be a list of strings")
        return [item.strip() for item in value if item.strip()]
    value = str(value).strip()
    # Empty strings are treated like null so they never clobber stored values
    return value or None


def to_iso_utc(value):
    """Stored naive UTC datetime as an ISO 8601 string ending in Z"""
    if value is None:
        return None
    stamp = value.replace(tzinfo=timezone.utc).isoformat(timespec='milliseconds')
    return stamp.replace('+00:00', 'Z')


def missing_fields(values, required):
    """Names of required fields absent or blank in the payload"""
    missing = []
    for name in required:
        value = values.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def record_to_dict(record, fields):
    """Convert a model row to its wire dictionary (camelCase keys)"""
    result = {'id': record.id}
    for wire_name, column_name in fields.items():
        value = getattr(record, column_name)
        if value is None and _column_kind(type(record), column_name) == 'list':
            value = []
        result[wire_name] = value
    result['createdAt'] = to_iso_utc(record.created_at)
    result['updatedAt'] = to_iso_utc(record.updated_at)
    return result


def list_records(model, fields, *order_by):
    """All rows of a table as dictionaries"""
    rows = model.query.order_by(*order_by).all()
    return [record_to_dict(row, fields) for row in rows]


def get_record(model, fields, record_id):
    """Single row by id, or None"""
    record = db.session.get(model, record_id)
    return record_to_dict(record, fields) if record else None


def create_record(model, fields, values):
    """Insert a new row with a generated id and matching timestamps"""
    normalized = {
        column_name: normalize_value(model, column_name, values.get(wire_name), wire_name)
        for wire_name, column_name in fields.items()
    }

    now = datetime.utcnow()
    record = model(created_at=now, updated_at=now)
    for column_name, value in normalized.items():
        if value is None:
            kind = _column_kind(model, column_name)
            if kind == 'list':
                value = []
            elif kind == 'bool':
                value = False
        setattr(record, column_name, value)

    db.session.add(record)
    db.session.commit()
    current_app.logger.info(f"Created {model.__tablename__} row {record.id}")
    return record_to_dict(record, fields)


def update_record(model, fields, record_id, values):
    """
    Merge provided fields into an existing row.

    Only fields with a non-null value overwrite the stored column; everything
    else keeps its current value, like COALESCE(new, old) in SQL.

    Returns:
        dict | None: Updated row, or None if the id is unknown
    """
    record = db.session.get(model, record_id)
    if not record:
        return None

    normalized = {
        column_name: normalize_value(model, column_name, values[wire_name], wire_name)
        for wire_name, column_name in fields.items()
        if wire_name in values
    }
    for column_name, value in normalized.items():
        if value is not None:
            setattr(record, column_name, value)

    record.updated_at = datetime.utcnow()
    db.session.commit()
    current_app.logger.info(f"Updated {model.__tablename__} row {record.id}")
    return record_to_dict(record, fields)


def delete_record(model, record_id):
    """Delete by id; returns True if a row was removed"""
    deleted = model.query.filter_by(id=record_id).delete()
    db.session.commit()
    if deleted:
        current_app.logger.info(f"Deleted {model.__tablename__} row {record_id}")
    return deleted > 0


def count_records(model, **filters):
    """Row count, optionally filtered by column equality"""
    return model.query.filter_by(**filters).count()
