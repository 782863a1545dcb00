"""
Public blog reader tests.
"""


def test_index_lists_only_published(client, create_post):
    create_post(slug='live', title='Live Post', status='published')
    create_post(slug='hidden', title='Hidden Draft')

    response = client.get('/blog/')

    assert response.status_code == 200
    assert b'Live Post' in response.data
    assert b'Hidden Draft' not in response.data


def test_index_without_posts(client):
    response = client.get('/blog/')

    assert response.status_code == 200
    assert b'No posts published yet.' in response.data


def test_post_page(client, create_post):
    create_post(slug='live', title='Live Post', status='published',
                content='<p>Hello <strong>readers</strong></p>', seoDescription='A short summary')

    response = client.get('/blog/live')

    assert response.status_code == 200
    assert b'<strong>readers</strong>' in response.data
    assert b'<meta name="description" content="A short summary">' in response.data


def test_post_page_strips_scripts(client, create_post):
    create_post(slug='sneaky', status='published',
                content='<p onclick="steal()">Hi</p><script>alert(1)</script>')

    body = client.get('/blog/sneaky').get_data(as_text=True)

    assert '<script>' not in body
    assert 'steal()' not in body
    assert '<p>Hi</p>' in body


def test_draft_redirects_to_index(client, create_post):
    create_post(slug='wip')

    response = client.get('/blog/wip')

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/blog/')


def test_unknown_slug_redirects_to_index(client):
    response = client.get('/blog/nope')

    assert response.status_code == 302
    assert response.headers['Location'].endswith('/blog/')
