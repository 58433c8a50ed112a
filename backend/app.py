from flask import Flask, request, jsonify
from flask_cors import CORS
import traceback
import time

from fdclosure import constants
from fdclosure.errors import AttributeLimitError, FDFormatError
from fdclosure.logger import LOGGER, configure_logging
from fdclosure.pipeline.armstrong import augment, closure, transitive, trivial
from fdclosure.pipeline.inference import candidate_keys, implies
from fdclosure.schema.fd import attribute_set
from fdclosure.schema.fd_json import fd_from_json, fdset_from_json, fdset_to_json

# Initialize Flask app
app = Flask(__name__)
CORS(app, resources={
    r"/api/*": {
        "origins": "*",
        "methods": ["GET", "POST", "OPTIONS"],
        "allow_headers": ["Content-Type"]
    }
})  # Enable CORS for frontend
configure_logging()


def _request_data():
    data = request.get_json(silent=True)
    if not data or not isinstance(data, dict):
        raise FDFormatError('Request body is empty')
    return data


def _names(data, key):
    value = data.get(key, [])
    if not isinstance(value, list):
        raise FDFormatError(f"'{key}' must be a list of attribute names")
    try:
        return attribute_set(value)
    except TypeError as e:
        raise FDFormatError(str(e)) from e


def _max_attributes(data):
    """Per-request limit, never looser than the server's configured limit"""
    value = data.get('max_attributes')
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise FDFormatError("'max_attributes' must be an integer")
    limit = constants.MAX_ATTRIBUTES
    if limit > 0 and not 0 < value <= limit:
        raise FDFormatError(f"'max_attributes' must be between 1 and {limit}")
    return value


def _failure(e):
    if isinstance(e, FDFormatError):
        return jsonify({'success': False, 'error': str(e)}), 400
    if isinstance(e, AttributeLimitError):
        return jsonify({
            'success': False,
            'error': str(e),
            'count': e.count,
            'limit': e.limit
        }), 422
    LOGGER.error(f"Unhandled error: {e}")
    return jsonify({
        'success': False,
        'error': str(e),
        'traceback': traceback.format_exc()
    }), 500


@app.route('/api/health', methods=['GET'])
def health():
    """Health check endpoint"""
    return jsonify({
        'status': 'ok',
        'version': '1.0.0',
        'message': 'fdclosure backend is running'
    })


@app.route('/api/closure', methods=['POST'])
def fd_closure():
    """Closure of an FD set under Armstrong's axioms"""
    try:
        data = _request_data()
        fdset = fdset_from_json(data)
        max_attributes = _max_attributes(data)

        start = time.time()
        result = closure(fdset, max_attributes=max_attributes)
        elapsed = (time.time() - start) * 1000

        return jsonify({
            'success': True,
            'fds': fdset_to_json(result),
            'count': len(result),
            'time_ms': elapsed,
            'timestamp': time.time()
        })

    except Exception as e:
        return _failure(e)


@app.route('/api/trivial', methods=['POST'])
def fd_trivial():
    """FDs derivable by reflexivity alone"""
    try:
        fdset = fdset_from_json(_request_data())
        result = trivial(fdset)
        return jsonify({'success': True, 'fds': fdset_to_json(result), 'count': len(result)})

    except Exception as e:
        return _failure(e)


@app.route('/api/transitive', methods=['POST'])
def fd_transitive():
    """New FDs derivable by transitivity"""
    try:
        fdset = fdset_from_json(_request_data())
        result = transitive(fdset)
        return jsonify({'success': True, 'fds': fdset_to_json(result), 'count': len(result)})

    except Exception as e:
        return _failure(e)


@app.route('/api/augment', methods=['POST'])
def fd_augment():
    """Augment every FD with the given attributes"""
    try:
        data = _request_data()
        fdset = fdset_from_json(data)
        result = augment(fdset, _names(data, 'attrs'))
        return jsonify({'success': True, 'fds': fdset_to_json(result), 'count': len(result)})

    except Exception as e:
        return _failure(e)


@app.route('/api/implies', methods=['POST'])
def fd_implies():
    """Check whether the FD set implies a single FD"""
    try:
        data = _request_data()
        fdset = fdset_from_json(data)
        if 'fd' not in data:
            raise FDFormatError("'fd' is required")
        dependency = fd_from_json(data['fd'])
        return jsonify({'success': True, 'implied': implies(fdset, dependency)})

    except Exception as e:
        return _failure(e)


@app.route('/api/keys', methods=['POST'])
def fd_keys():
    """Candidate keys of a relation schema"""
    try:
        data = _request_data()
        fdset = fdset_from_json(data)
        schema = _names(data, 'schema') if 'schema' in data else fdset.attributes()
        keys = candidate_keys(schema, fdset, max_attributes=_max_attributes(data))
        return jsonify({'success': True, 'keys': [sorted(key) for key in keys]})

    except Exception as e:
        return _failure(e)


@app.errorhandler(404)
def not_found(e):
    return jsonify({'error': 'Endpoint not found'}), 404


@app.errorhandler(500)
def server_error(e):
    return jsonify({'error': 'Internal server error'}), 500


if __name__ == '__main__':
    print("Starting fdclosure backend...")
    app.run(debug=constants.SERVER_DEBUG, port=constants.SERVER_PORT, host=constants.SERVER_HOST)
