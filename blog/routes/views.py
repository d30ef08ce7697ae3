"""
Views blueprint — serves the post list and detail pages via Jinja2.
"""
import logging
from flask import Blueprint, abort, current_app, render_template, request
from markupsafe import Markup

from blog.services.post_service import PostService

logger = logging.getLogger(__name__)

views_bp = Blueprint('views', __name__)
post_service = PostService()


@views_bp.app_template_filter('post_date')
def post_date_filter(value):
    """Format a timestamp like 'March 3, 2025, 09:15 AM'."""
    if not value:
        return ''
    return f"{value.strftime('%B')} {value.day}, {value.year}, {value.strftime('%I:%M %p')}"


@views_bp.app_context_processor
def inject_common():
    return {'blog_title': current_app.config['BLOG_TITLE']}


@views_bp.route('/')
def index():
    """Post list with truncated previews."""
    page = request.args.get('page', 1, type=int)
    max_length = current_app.config['SUMMARY_MAX_LENGTH']
    pagination = post_service.list_posts(page=page, per_page=current_app.config['POSTS_PER_PAGE'])

    cards = []
    for post in pagination.items:
        summary = post_service.summarize(post, max_length)
        cards.append({
            'post': post,
            'preview': Markup(summary.content),
            'is_truncated': summary.is_truncated,
        })

    return render_template(
        'pages/index.html',
        cards=cards,
        pagination=pagination,
    )


@views_bp.route('/posts/<int:post_id>')
def post_detail(post_id):
    """Full post, rendered without truncation."""
    post = post_service.get_post(post_id)
    if not post:
        abort(404)

    return render_template(
        'pages/post.html',
        post=post,
        content=Markup(post.content),
    )
