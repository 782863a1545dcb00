"""
Analytics Module - CV download statistics and CSV export
"""

import csv
import io
import re
from collections import Counter, OrderedDict
from datetime import timedelta

from extensions import db
from models import CVDownload, as_utc, utcnow


MOBILE_PATTERN = re.compile(r'mobile', re.I)
TABLET_PATTERN = re.compile(r'tablet|ipad', re.I)

# Order matters: Edge and Chrome UAs also mention Safari, Edge mentions Chrome
BROWSER_PATTERNS = (
    ('Edge', re.compile(r'Edg(e|A|iOS)?/')),
    ('Firefox', re.compile(r'Firefox/|FxiOS/')),
    ('Chrome', re.compile(r'Chrome/|CriOS/')),
    ('Safari', re.compile(r'Safari/')),
)

CSV_HEADERS = ['Date/Time', 'IP Address', 'Device Type', 'Browser', 'Referrer']


def get_device_type(user_agent):
    user_agent = user_agent or ''
    if MOBILE_PATTERN.search(user_agent):
        return 'Mobile'
    if TABLET_PATTERN.search(user_agent):
        return 'Tablet'
    return 'Desktop'


def get_browser(user_agent):
    user_agent = user_agent or ''
    for name, pattern in BROWSER_PATTERNS:
        if pattern.search(user_agent):
            return name
    return 'Other'


def get_download_stats(days=30, now=None):
    """Totals, daily trend and device/browser breakdowns for the admin area"""
    now = now or utcnow()
    today = now.date()
    trend_start = today - timedelta(days=days - 1)
    week_ago = now - timedelta(days=7)

    daily = OrderedDict(
        ((trend_start + timedelta(days=i)).isoformat(), 0) for i in range(days)
    )
    devices = Counter()
    browsers = Counter()
    total = last_7_days = downloads_today = 0

    rows = db.session.query(CVDownload.downloaded_at, CVDownload.user_agent)
    for downloaded_at, user_agent in rows:
        downloaded_at = as_utc(downloaded_at)
        total += 1
        if downloaded_at >= week_ago:
            last_7_days += 1
        day = downloaded_at.date()
        if day == today:
            downloads_today += 1
        if day.isoformat() in daily:
            daily[day.isoformat()] += 1
        devices[get_device_type(user_agent)] += 1
        browsers[get_browser(user_agent)] += 1

    return {
        'total': total,
        'last7Days': last_7_days,
        'today': downloads_today,
        'daily': [{'date': date, 'downloads': count} for date, count in daily.items()],
        'devices': dict(devices),
        'browsers': dict(browsers),
    }


def export_downloads_csv(downloads):
    """Render CV downloads as CSV text"""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator='\n')
    writer.writerow(CSV_HEADERS)
    for download in downloads:
        writer.writerow([
            as_utc(download.downloaded_at).strftime('%Y-%m-%d %H:%M:%S'),
            download.ip_address,
            get_device_type(download.user_agent),
            get_browser(download.user_agent),
            download.referrer or 'Direct',
        ])
    return buffer.getvalue()
