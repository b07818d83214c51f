"""
Validation Server

Flask application that triggers validation runs outside of GitHub Actions.
"""

import asyncio
import logging
from typing import Optional

from flask import Flask, request, jsonify
from flask_cors import CORS
from pydantic import ValidationError

from . import __version__
from .api import RunRequest, UseCaseValidatorAPI
from .config import AppConfig, ValidatorConfig
from .models.review import ValidationRequest, ValidationRunResponse


logger = logging.getLogger(__name__)


def create_app(base_config: Optional[AppConfig] = None) -> Flask:
    """
    Create the Flask application.

    Args:
        base_config: Defaults for the settings a request does not carry

    Returns:
        Configured Flask app
    """
    app = Flask(__name__)
    CORS(app)  # Enable CORS for frontend

    defaults = base_config or AppConfig.from_env()

    @app.route('/api/v1/health', methods=['GET'])
    def health_check():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'service': 'use-case-validator',
            'version': __version__
        })

    @app.route('/api/v1/validations', methods=['POST'])
    def run_validation():
        """Validate a pull request."""
        data = request.get_json(silent=True) or {}
        if not isinstance(data, dict):
            return jsonify({
                'error': 'Request body must be a JSON object',
                'status': 'invalid'
            }), 400

        try:
            validation_request = ValidationRequest(**data)
        except ValidationError as e:
            return jsonify({
                'error': str(e),
                'status': 'invalid'
            }), 400

        config = AppConfig(
            validator=ValidatorConfig(
                method_name=validation_request.method_name,
                approve_message=validation_request.approve_message,
                single_class_in_file=validation_request.single_class_in_file == 'true',
                include_suggestions=defaults.validator.include_suggestions,
                file_suffix=defaults.validator.file_suffix,
                class_suffix=defaults.validator.class_suffix,
                bot_login=defaults.validator.bot_login,
                workspace=defaults.validator.workspace,
            ),
            github=defaults.github,
            logging=defaults.logging,
            debug=defaults.debug,
        )

        logger.info(f"Validation requested for {validation_request.repository}#{validation_request.pr_number}")
        run = asyncio.run(UseCaseValidatorAPI(config).validate_pull_request(RunRequest(
            repository=validation_request.repository,
            pr_number=validation_request.pr_number,
            github_token=validation_request.github_token,
        )))

        response = ValidationRunResponse.from_run(run)
        status_code = 500 if run.status == 'failed' else 200
        return jsonify(response.model_dump(mode='json')), status_code

    return app
