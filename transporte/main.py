import logging

from flask import Flask, render_template

from transporte.config import Config


def configurar_logging(app):
    # escribe en LOG_FILE (errors.log en el working dir por defecto)
    logging.basicConfig(
        filename=app.config["LOG_FILE"],
        level=getattr(logging, str(app.config["LOG_LEVEL"]).upper(), logging.ERROR),
        format='%(asctime)s %(levelname)s %(message)s',
    )


def create_app(config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if config:
        app.config.update(config)

    configurar_logging(app)

    @app.route("/")
    def home():
        return render_template("costo_minimo.html", max_dimension=app.config["MAX_DIMENSION"])

    # Importar controladores
    from transporte.controllers.costo_minimo_controller import costo_minimo_bp
    app.register_blueprint(costo_minimo_bp)

    return app
