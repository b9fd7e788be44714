"""
README Flattener - API Server
Flask application serving repository READMEs as typed content.
"""

import logging
from typing import Optional

from flask import Flask

from readme_api.controllers.readme_controller import ReadmeController
from readme_api.core.utils.config_loader import AppConfig
from readme_api.server.routers.readme_router import readme_router

logger = logging.getLogger(__name__)


def create_app(config: AppConfig, controller: Optional[ReadmeController] = None) -> Flask:
    """
    Application factory wiring the controller into the app config.
    """
    flask_app = Flask(__name__)

    flask_app.config['APP_CONFIG'] = config
    flask_app.config['README_CONTROLLER'] = controller or ReadmeController(config)

    flask_app.register_blueprint(readme_router, url_prefix='/api')

    return flask_app


def run_server(config: AppConfig, host: Optional[str] = None, port: Optional[int] = None) -> None:
    """Starts the Flask server with the given configuration."""
    app = create_app(config)
    host = host or config.host
    port = port or config.port

    logger.info("README API listening on http://%s:%d", host, port)
    for rule in app.url_map.iter_rules():
        if "api" in str(rule):
            logger.info("Route: %s [%s]", rule, ", ".join(sorted(rule.methods - {"HEAD"})))

    # use_reloader=False prevents double initialization of the controller
    app.run(host=host, port=port, debug=False, use_reloader=False)
