import pytest
from datetime import datetime, timezone

from blog import create_app
from blog.auth import issue_token
from blog.extensions import db as _db
from blog.models.post import Post
from blog.models.profile import UserProfile
from config import TestConfig


@pytest.fixture(scope='session')
def app():
    """Create app with test config."""
    app = create_app(TestConfig)
    return app


@pytest.fixture(autouse=True)
def setup_db(app):
    """Create tables before each test, drop after."""
    with app.app_context():
        _db.create_all()
        yield
        _db.session.rollback()
        _db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_headers(app):
    return {'X-Admin-Key': app.config['ADMIN_API_KEY']}


@pytest.fixture
def db_session(app):
    with app.app_context():
        yield _db.session


def _auth_headers(app, uid, email, display_name):
    with app.app_context():
        token = issue_token(uid, email=email, display_name=display_name)
    return {'Authorization': f'Bearer {token}'}


@pytest.fixture
def editor(db_session):
    profile = UserProfile(
        uid='editor-1',
        email='editor@example.com',
        display_name='Eddie Editor',
        profile='editor',
    )
    db_session.add(profile)
    db_session.commit()
    return profile


@pytest.fixture
def reader(db_session):
    profile = UserProfile(
        uid='reader-1',
        email='reader@example.com',
        display_name='Rita Reader',
        profile='reader',
    )
    db_session.add(profile)
    db_session.commit()
    return profile


@pytest.fixture
def editor_headers(app, editor):
    return _auth_headers(app, 'editor-1', 'editor@example.com', 'Eddie Editor')


@pytest.fixture
def reader_headers(app, reader):
    return _auth_headers(app, 'reader-1', 'reader@example.com', 'Rita Reader')


@pytest.fixture
def stranger_headers(app):
    """Signed-in user with no profile yet."""
    return _auth_headers(app, 'new-user', 'new@example.com', 'New User')


@pytest.fixture
def sample_posts(db_session, editor):
    """Insert three posts with distinct creation times, oldest first."""
    long_body = '<p>' + ' '.join(['Lorem ipsum dolor sit amet.'] * 30) + '</p>'
    posts = [
        Post(
            title='Oldest post',
            content='<p>Short and sweet.</p>',
            author_id=editor.uid,
            author_name=editor.display_name,
            author_email=editor.email,
            created_at=datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc),
        ),
        Post(
            title='Middle post',
            content=long_body,
            author_id=editor.uid,
            author_name=editor.display_name,
            author_email=editor.email,
            created_at=datetime(2025, 1, 2, 9, 0, tzinfo=timezone.utc),
        ),
        Post(
            title='Newest post',
            content='<h2>Hello</h2><p>Newest content here.</p>',
            author_id=editor.uid,
            author_name=editor.display_name,
            author_email=editor.email,
            created_at=datetime(2025, 1, 3, 9, 0, tzinfo=timezone.utc),
        ),
    ]
    for p in posts:
        db_session.add(p)
    db_session.commit()
    return posts
