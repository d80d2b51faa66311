# farmstand/__init__.py

import logging

from flask import Flask, render_template
from peewee import SqliteDatabase
from werkzeug.exceptions import HTTPException

from .errors import StoreUnavailable
from .method_override import MethodOverrideMiddleware
from .repository import ProductRepository

# Base locale et port fixes (pas de variables d'environnement)
DATABASE = 'farmstand.db'
PORT = 3000


def create_app(test_config=None):
    """
    Construit l'application : configuration, connexion à la base,
    routes /products et gestion des erreurs.
    test_config permet aux tests de remplacer DATABASE.
    """
    app = Flask(__name__)
    app.config.from_mapping(
        DATABASE=DATABASE,
        PORT=PORT,
        METHOD_OVERRIDE_PARAM='_method',
        METHOD_OVERRIDE_HEADER='X-HTTP-Method-Override',
    )
    if test_config is not None:
        app.config.from_mapping(test_config)

    app.logger.setLevel(logging.INFO)

    # Une seule connexion pour tout le processus, ouverte ici
    repository = ProductRepository(SqliteDatabase(app.config['DATABASE']))
    try:
        repository.connect()
    except StoreUnavailable as err:
        # On journalise et on continue : les requêtes répondront 500
        app.logger.error("La connexion avec la base %s a échoué : %s", app.config['DATABASE'], err.message)
    else:
        app.logger.info("Connexion ouverte avec la base %s", app.config['DATABASE'])
    app.extensions['farmstand.repository'] = repository

    app.wsgi_app = MethodOverrideMiddleware(
        app.wsgi_app,
        param=app.config['METHOD_OVERRIDE_PARAM'],
        header=app.config['METHOD_OVERRIDE_HEADER'],
    )

    from .controllers.products import bp as products_bp
    app.register_blueprint(products_bp)

    register_error_handlers(app)
    return app


def register_error_handlers(app):

    @app.errorhandler(StoreUnavailable)
    def store_unavailable(err):
        app.logger.exception("Base de données indisponible")
        return render_template(
            'errors/error.html', code=500, title="Erreur serveur", message=err.message
        ), 500

    @app.errorhandler(HTTPException)
    def http_error(err):
        return render_template(
            'errors/error.html', code=err.code, title=err.name, message=err.description
        ), err.code
