import logging
from flask import Blueprint, current_app, jsonify, request

from readme_api.exceptions import RequestValidationError

logger = logging.getLogger(__name__)

readme_router = Blueprint('readme_router', __name__)

GENERIC_FAILURE = "Failed to build README document"


def get_readme_controller():
    """Retrieves the README controller from the Flask application context."""
    controller = current_app.config.get('README_CONTROLLER')
    if not controller:
        raise RuntimeError("ReadmeController is not set in app.config['README_CONTROLLER']")
    return controller


@readme_router.after_request
def add_cors_headers(response):
    response.headers['Access-Control-Allow-Origin'] = '*'
    response.headers['Access-Control-Allow-Methods'] = 'GET, OPTIONS'
    response.headers['Access-Control-Allow-Headers'] = 'Content-Type'
    return response


@readme_router.route('/readme', methods=['GET', 'OPTIONS'])
def get_readme():
    """
    Returns the flattened README document for ?owner=&repo=.
    Preflight requests get an empty 200.
    """
    if request.method == 'OPTIONS':
        return '', 200

    owner = request.args.get('owner')
    repo = request.args.get('repo')

    try:
        document = get_readme_controller().build_document(owner, repo)
    except RequestValidationError as e:
        return jsonify({"error": str(e)}), 400
    except Exception as e:
        # Detail stays in the log; callers only see the generic message
        logger.error("Error building README document for %s/%s: %s", owner, repo, e, exc_info=True)
        return jsonify({"error": GENERIC_FAILURE}), 500

    return current_app.response_class(document.to_json(), mimetype='application/json')
