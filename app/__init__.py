from flask import Flask
from flask_cors import CORS
from config import Config
from app.models import db
from app.errors import register_error_handlers
import logging


def configure_logging(app):
    handlers = [logging.StreamHandler()]
    if app.config.get('LOG_FILE'):
        handlers.append(logging.FileHandler(app.config['LOG_FILE'], mode='a'))

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s (%(filename)s:%(lineno)d): %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
        handlers=handlers
    )
    logging.getLogger('app').setLevel(app.config.get('LOG_LEVEL', 'INFO'))
    logging.getLogger('werkzeug').setLevel(logging.INFO)
    logging.getLogger('sqlalchemy.engine').setLevel(logging.WARNING)


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    configure_logging(app)
    logger = logging.getLogger(__name__)
    logger.info("Starting application initialization")

    # Every origin is allowed
    CORS(app,
         resources={
             r"/*": {
                 "origins": "*",
                 "methods": ["GET", "POST", "OPTIONS"],
                 "allow_headers": ["Content-Type", "Accept"],
                 "send_wildcard": True
             }
         })

    # Configure SQLAlchemy
    try:
        app.config['SQLALCHEMY_DATABASE_URI'] = app.config['DATABASE_URL']
        app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
        app.config['SQLALCHEMY_ENGINE_OPTIONS'] = {
            "pool_recycle": 300,
            "pool_pre_ping": True,
        }

        db.init_app(app)

        with app.app_context():
            db.create_all()
            logger.info("Database tables created successfully")

        from app.routes import auth, players, feedback, main
        from app.routes.commands import register_commands
        app.register_blueprint(main.bp)
        app.register_blueprint(auth.bp, url_prefix='/api/auth')
        app.register_blueprint(players.bp, url_prefix='/api/players')
        app.register_blueprint(feedback.bp, url_prefix='/api')
        register_error_handlers(app)
        register_commands(app)
        logger.info("Successfully registered all blueprints")

    except Exception as e:
        logger.error(f"Error during application initialization: {str(e)}")
        raise

    logger.info("Application initialization completed successfully")
    return app
