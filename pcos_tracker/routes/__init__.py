from .home_routes import home_bp
from .user_routes import user_bp
from .symptom_routes import symptom_bp
from .report_routes import report_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(user_bp)
    app.register_blueprint(symptom_bp)
    app.register_blueprint(report_bp)
