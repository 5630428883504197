from flask import request, jsonify


def wants_json():
    """True when the client asked for JSON rather than a page."""
    if request.headers.get('X-Requested-With') == 'fetch':
        return True
    best = request.accept_mimetypes.best_match(['text/html', 'application/json'])
    return best == 'application/json'


def error_response(code, message):
    """Build an error response in the format the client expects."""
    if wants_json():
        return jsonify({'error': message}), code
    return message, code
