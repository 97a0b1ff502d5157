from flask import Flask, Response, current_app
from werkzeug.exceptions import HTTPException
from dotenv import load_dotenv
from typing import Optional, Dict, Any
import os

from .config import Config, load_config, parse_config
from .config.settings import DEFAULT_BASE_URL
from .errors import GeneratorError

load_dotenv()

__version__ = "1.0.0"


def create_app(config: Optional[Dict[str, Any]] = None):
    """Preview server: renders the document on every request so config edits show up on reload."""
    app = Flask(__name__)

    app.config['GENERATOR_CONFIG'] = os.getenv('GENERATOR_CONFIG', 'generator-config.yaml')
    app.config['GENERATOR_BASE_URL'] = os.getenv('GENERATOR_BASE_URL')
    # in-memory generator config mapping; takes precedence over GENERATOR_CONFIG
    app.config['GENERATOR_SPEC'] = None

    if config:
        # allow tests or callers to override default config values
        app.config.update(config)

    @app.route('/healthz')
    def health():
        return {'status': 'ok'}

    # Unified error handler producing standardized JSON shape
    @app.errorhandler(Exception)
    def handle_errors(e):  # type: ignore
        if isinstance(e, HTTPException):
            payload = {
                'error': {
                    'status': e.code,
                    'title': e.name,
                    'detail': e.description,
                }
            }
            return payload, e.code
        if isinstance(e, GeneratorError):
            app.logger.warning('Document generation failed: %s', e)
            return {
                'error': {
                    'status': 422,
                    'title': type(e).__name__,
                    'detail': str(e),
                }
            }, 422
        # Unhandled exception
        app.logger.exception('Unhandled exception')
        return {
            'error': {
                'status': 500,
                'title': 'Internal Server Error',
                'detail': 'Unexpected error'
            }
        }, 500

    from .openapi import generate
    from .writer import dump_document

    @app.route('/openapi.json')
    def openapi_json():
        return generate(*_current_generator_input())

    @app.route('/openapi.yaml')
    def openapi_yaml():
        text = dump_document(generate(*_current_generator_input()), 'yaml')
        return Response(text, mimetype='application/yaml')

    @app.route('/docs')
    def docs_index():
        # Lightweight HTML referencing Redoc CDN (no local install) for quick browsing
        return (
            "<!DOCTYPE html><html><head><title>API Docs</title>"
            "<link rel=\"stylesheet\" href=\"https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.css\" />"
            "</head><body><redoc spec-url='/openapi.json'></redoc>"
            "<script src='https://cdn.jsdelivr.net/npm/redoc@next/bundles/redoc.standalone.js'></script>"
            "</body></html>"
        )

    return app


def _current_generator_input():
    spec = current_app.config.get('GENERATOR_SPEC')
    if spec is not None:
        config: Config = parse_config(spec)
    else:
        config = load_config(current_app.config['GENERATOR_CONFIG'])
    base_url = current_app.config.get('GENERATOR_BASE_URL') or DEFAULT_BASE_URL.format(version=config.version)
    return config, base_url
