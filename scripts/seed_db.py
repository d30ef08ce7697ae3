#!/usr/bin/env python3
"""Load a seed editor and sample posts into the database. Idempotent."""

import json
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from blog import create_app
from blog.extensions import db
from blog.models.post import Post
from blog.services.profile_service import ProfileService


def seed_editor(uid, email, display_name):
    """Create (or promote) the seed editor profile."""
    profile = ProfileService().upsert_profile(uid, email=email, display_name=display_name, profile='editor')
    print(f"Editor: {profile.display_name} <{profile.email}> ({profile.uid})")
    return profile


def seed_posts(filepath, editor):
    """Load posts from JSON. Skip existing by title."""
    with open(filepath) as f:
        posts = json.load(f)

    added = 0
    skipped = 0
    for p in posts:
        existing = Post.query.filter_by(title=p['title']).first()
        if existing:
            skipped += 1
            continue

        post = Post(
            title=p['title'],
            content=p['content'],
            author_id=editor.uid,
            author_name=editor.display_name,
            author_email=editor.email,
        )
        db.session.add(post)
        added += 1

    db.session.commit()
    print(f"Posts: {added} added, {skipped} skipped (already exist)")


if __name__ == '__main__':
    app = create_app()
    project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))

    with app.app_context():
        print("Seeding database...")
        editor = seed_editor(
            os.getenv('SEED_EDITOR_UID', 'seed-editor'),
            os.getenv('SEED_EDITOR_EMAIL', 'editor@example.com'),
            os.getenv('SEED_EDITOR_NAME', 'Seed Editor'),
        )
        seed_posts(os.path.join(project_root, 'seed_posts.json'), editor)
        print("Done.")
