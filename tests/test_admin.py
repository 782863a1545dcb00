"""
Admin dashboard, analytics and CSV export tests.
"""

import csv
import io
from datetime import timedelta

from extensions import db
from models import CVDownload, utcnow
from conftest import ADMIN_EMAIL


IPHONE_UA = ('Mozilla/5.0 (iPhone; CPU iPhone OS 17_0 like Mac OS X) AppleWebKit/605.1.15 '
             '(KHTML, like Gecko) Version/17.0 Mobile/15E148 Safari/604.1')
IPAD_UA = ('Mozilla/5.0 (iPad; CPU OS 17_0 like Mac OS X) AppleWebKit/605.1.15 '
           '(KHTML, like Gecko) Version/17.0 Safari/604.1')
FIREFOX_UA = 'Mozilla/5.0 (X11; Linux x86_64; rv:121.0) Gecko/20100101 Firefox/121.0'
EDGE_UA = ('Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 '
           '(KHTML, like Gecko) Chrome/120.0 Safari/537.36 Edg/120.0')


def _add_downloads(app, rows):
    with app.app_context():
        db.session.add_all([
            CVDownload(ip_address=ip, user_agent=ua, referrer=referrer, downloaded_at=when)
            for ip, ua, referrer, when in rows
        ])
        db.session.commit()


def test_dashboard_summary(admin_client, create_post):
    create_post(slug='live', status='published')
    create_post(slug='wip')
    create_post(slug='wip-2')
    admin_client.post('/api/cv-downloads', json={'userAgent': FIREFOX_UA})

    response = admin_client.get('/admin/')

    assert response.status_code == 200
    body = response.get_json()
    assert body['user']['email'] == ADMIN_EMAIL
    assert body['stats'] == {'publishedPosts': 1, 'draftPosts': 2, 'totalDownloads': 1}
    assert [p['slug'] for p in body['recentPosts']] == ['wip-2', 'wip', 'live']
    assert len(body['recentDownloads']) == 1
    assert 'Automation' in body['categories']


def test_analytics_counts(app, admin_client):
    now = utcnow()
    _add_downloads(app, [
        ('1.1.1.1', IPHONE_UA, None, now),
        ('1.1.1.2', IPAD_UA, None, now - timedelta(days=3)),
        ('1.1.1.3', FIREFOX_UA, 'https://linkedin.com', now - timedelta(days=10)),
        ('1.1.1.4', EDGE_UA, None, now - timedelta(days=40)),
    ])

    response = admin_client.get('/admin/analytics')

    assert response.status_code == 200
    stats = response.get_json()
    assert stats['total'] == 4
    assert stats['last7Days'] == 2
    assert stats['today'] == 1
    assert len(stats['daily']) == 30
    assert stats['daily'][-1] == {'date': now.date().isoformat(), 'downloads': 1}
    assert sum(day['downloads'] for day in stats['daily']) == 3
    assert stats['devices'] == {'Mobile': 1, 'Tablet': 1, 'Desktop': 2}
    assert stats['browsers'] == {'Safari': 2, 'Firefox': 1, 'Edge': 1}


def test_analytics_empty(admin_client):
    stats = admin_client.get('/admin/analytics').get_json()

    assert stats['total'] == 0
    assert all(day['downloads'] == 0 for day in stats['daily'])
    assert stats['devices'] == {}


def test_csv_export(app, admin_client):
    now = utcnow()
    _add_downloads(app, [
        ('1.1.1.1', IPHONE_UA, None, now - timedelta(hours=1)),
        ('2.2.2.2', FIREFOX_UA, 'https://github.com', now),
    ])

    response = admin_client.get('/admin/analytics/export.csv')

    assert response.status_code == 200
    assert response.mimetype == 'text/csv'
    assert 'cv-downloads-' in response.headers['Content-Disposition']

    rows = list(csv.reader(io.StringIO(response.get_data(as_text=True))))
    assert rows[0] == ['Date/Time', 'IP Address', 'Device Type', 'Browser', 'Referrer']
    assert rows[1][1:] == ['2.2.2.2', 'Desktop', 'Firefox', 'https://github.com']
    assert rows[2][1:] == ['1.1.1.1', 'Mobile', 'Safari', 'Direct']
