from flask import Flask, abort, current_app, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import MethodNotAllowed

from gemini_proxy.config import load_settings
from gemini_proxy.gemini import generate_text


def _json_error(message, status_code=400):
    """Return a JSON error response with a consistent structure."""
    return jsonify({"error": message}), status_code


def generate_handler():
    settings = current_app.config["SETTINGS"]

    # The key check runs before body validation so a misconfigured deployment
    # always reports itself, whatever the caller sent.
    if not settings.gemini_api_key:
        return _json_error("API key not configured.", 500)

    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}

    user_query = data.get("userQuery")
    system_prompt = data.get("systemPrompt")
    if not user_query or not system_prompt:
        return _json_error("Missing userQuery or systemPrompt.")

    try:
        text = generate_text(settings.gemini_api_key, user_query, system_prompt)
    except Exception:
        current_app.logger.exception("Error in serverless function")
        return _json_error("Failed to generate message.", 500)

    return jsonify({"text": text}), 200


def preflight_handler():
    # Only CORS preflights get through; a bare OPTIONS is an ordinary non-POST call.
    if not (request.headers.get("Origin") and request.headers.get("Access-Control-Request-Method")):
        abort(405)
    return current_app.make_default_options_response()


def method_not_allowed(error):
    return _json_error("Method Not Allowed", 405)


def create_app(settings=None):
    app = Flask(__name__)
    app.config["SETTINGS"] = settings if settings is not None else load_settings()

    # flask_cors adds the CORS headers, including on preflight responses.
    CORS(app, resources={r"/api/*": {"origins": list(app.config["SETTINGS"].cors_origins)}})

    app.add_url_rule(
        "/api/generate",
        "generate",
        generate_handler,
        methods=["POST"],
        provide_automatic_options=False,
    )
    app.add_url_rule(
        "/api/generate",
        "generate_preflight",
        preflight_handler,
        methods=["OPTIONS"],
        provide_automatic_options=False,
    )
    app.register_error_handler(MethodNotAllowed, method_not_allowed)

    return app
