def register_blueprints(app):
    from blog.routes.health import health_bp
    from blog.routes.posts import posts_bp
    from blog.routes.profiles import profiles_bp
    from blog.routes.admin import admin_bp
    from blog.routes.views import views_bp

    app.register_blueprint(health_bp)
    app.register_blueprint(posts_bp, url_prefix='/api/posts')
    app.register_blueprint(profiles_bp, url_prefix='/api/profiles')
    app.register_blueprint(admin_bp, url_prefix='/api/admin')
    app.register_blueprint(views_bp)
