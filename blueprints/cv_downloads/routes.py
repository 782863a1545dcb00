"""
CV Downloads Routes - Append-only CV download log
"""

from flask import request, jsonify, current_app
from extensions import db
from models import CVDownload, utcnow
from utils.errors import MissingField, NotFound
from utils.helpers import clean_text, get_json_body, get_pagination, parse_id
from utils.security import get_client_ip
from . import cv_downloads_bp


@cv_downloads_bp.route('/cv-downloads', methods=['GET'])
def get_cv_downloads():
    """Single record by ?id=, otherwise a paginated list"""
    raw_id = request.args.get('id')
    if raw_id:
        record = db.session.get(CVDownload, parse_id(raw_id))
        if record is None:
            raise NotFound('Record not found')
        return jsonify(record.to_dict()), 200

    limit, offset = get_pagination()
    query = CVDownload.query

    ip_address = request.args.get('ip_address')
    if ip_address:
        query = query.filter(CVDownload.ip_address == ip_address)

    records = (query.order_by(CVDownload.downloaded_at.desc(), CVDownload.id.desc())
               .limit(limit).offset(offset).all())
    return jsonify([record.to_dict() for record in records]), 200


@cv_downloads_bp.route('/cv-downloads', methods=['POST'])
def record_cv_download():
    """Log a CV download; the IP comes from proxy headers, never the body"""
    body = get_json_body()

    user_agent = clean_text(body.get('userAgent'))
    if user_agent is None:
        raise MissingField('user_agent', 'User agent')

    record = CVDownload(
        ip_address=get_client_ip(),
        user_agent=user_agent,
        referrer=clean_text(body.get('referrer')),
        downloaded_at=utcnow(),
    )
    db.session.add(record)
    db.session.commit()

    current_app.logger.info(f"CV download recorded: id={record.id}, ip={record.ip_address}")
    return jsonify(record.to_dict()), 201
