"""
CLI Commands - Database setup and seeding

Usage:
    flask --app app init-db
    flask --app app create-admin --email admin@example.com --password secret
    flask --app app seed-blog-posts
"""

import click
from flask import current_app
from flask.cli import with_appcontext
from extensions import db
from models import BlogPost, User, POST_STATUS_PUBLISHED, utcnow
from utils.security import hash_password


SAMPLE_BLOG_POSTS = [
    {
        'title': 'How I Prototyped RoomCheck in 2 Hours',
        'slug': 'roomcheck-prototype',
        'category': 'Learning',
        'content': 'A quick dive into rapid prototyping with Power Automate and Teams integration. '
                   'I built an intelligent automation bot that checks meeting room availability '
                   'in real-time and prevents double bookings.',
        'seo_description': 'Learn how I built RoomCheck, an intelligent automation bot for meeting '
                           'room availability using Power Automate and Teams integration.',
    },
    {
        'title': 'Lessons from Automating a Confluence Knowledge Base',
        'slug': 'confluence-automation-lessons',
        'category': 'Learning',
        'content': 'What I learned building Python automation for team documentation. By syncing '
                   'Jira with Confluence, I saved 10+ team hours weekly and improved first-call '
                   'resolution by 25%.',
        'seo_description': 'Discover practical lessons from building Python automation to sync Jira '
                           'with Confluence, saving hours and improving team efficiency.',
    },
    {
        'title': 'Beyond the Exam: What I Actually Learned from SC-900',
        'slug': 'sc-900-real-learnings',
        'category': 'Learning',
        'content': 'Real-world security insights that go beyond certification prep. The SC-900 '
                   'taught me fundamental security concepts that I now apply daily in my '
                   'Microsoft 365 administration work.',
        'seo_description': 'Real-world security insights from SC-900 certification that go beyond '
                           'exam prep and apply to daily Microsoft 365 administration.',
    },
]


def create_or_update_admin(email, password, name='Admin'):
    """Create the admin user, or reset its password if it already exists"""
    user = User.query.filter_by(email=email).first()
    created = user is None
    if created:
        user = User(email=email)
        db.session.add(user)
    user.name = name
    user.password_hash = hash_password(password)
    user.is_active = True
    db.session.commit()
    return user, created


def seed_blog_posts():
    """Insert the sample posts whose slugs are not taken yet"""
    existing = {slug for (slug,) in db.session.query(BlogPost.slug).all()}
    inserted = 0
    for sample in SAMPLE_BLOG_POSTS:
        if sample['slug'] in existing:
            continue
        now = utcnow()
        db.session.add(BlogPost(
            status=POST_STATUS_PUBLISHED,
            created_at=now,
            updated_at=now,
            published_at=now,
            **sample
        ))
        inserted += 1
    db.session.commit()
    return inserted


@click.command('init-db')
@with_appcontext
def init_db_command():
    """Create all database tables."""
    db.create_all()
    click.echo('✓ Database tables created')


@click.command('create-admin')
@click.option('--email', default=None, help='Admin email (defaults to ADMIN_EMAIL)')
@click.option('--password', default=None, help='Admin password (defaults to ADMIN_PASSWORD)')
@click.option('--name', default=None, help='Display name')
@with_appcontext
def create_admin_command(email, password, name):
    """Create or update the admin user."""
    email = email or current_app.config.get('ADMIN_EMAIL')
    password = password or current_app.config.get('ADMIN_PASSWORD')
    name = name or current_app.config.get('ADMIN_NAME', 'Admin')
    if not email or not password:
        raise click.UsageError('Email and password are required (options or ADMIN_EMAIL / ADMIN_PASSWORD)')

    user, created = create_or_update_admin(email, password, name)
    click.echo(f"✓ Admin user {'created' if created else 'updated'}: {user.email}")


@click.command('seed-blog-posts')
@with_appcontext
def seed_blog_posts_command():
    """Insert sample published blog posts."""
    inserted = seed_blog_posts()
    click.echo(f'✓ Blog posts seeded: {inserted} inserted')


def register_commands(app):
    app.cli.add_command(init_db_command)
    app.cli.add_command(create_admin_command)
    app.cli.add_command(seed_blog_posts_command)
