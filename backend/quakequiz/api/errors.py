from flask import jsonify
from werkzeug.exceptions import HTTPException

from quakequiz.services.identity import IdentityError


def register_error_handlers(flask_app):
    @flask_app.errorhandler(IdentityError)
    def handle_identity_error(exc):
        return jsonify(exc.to_dict()), exc.status_code

    @flask_app.errorhandler(HTTPException)
    def handle_http_error(exc):
        return jsonify({'message': exc.description}), exc.code

    @flask_app.errorhandler(Exception)
    def handle_unexpected_error(exc):
        flask_app.logger.exception(f"[unhandled] {exc}")
        return jsonify({'message': 'Internal server error'}), 500
