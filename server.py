"""
RisuAI Inspector Flask Server

Features:
- Single-request file upload and decode
- JSON rendering of the decoded value tree
- Typed error responses
"""

import asyncio
from pathlib import Path

from flask import Flask, request, jsonify, Response

from werkzeug.utils import secure_filename

from risu_inspector_py import __version__
from risu_inspector_py.config import Config
from risu_inspector_py.codecs.rpack import create_codec
from risu_inspector_py.errors import RisuFormatError
from risu_inspector_py.output.json_output import dumps
from risu_inspector_py.parser import parse, detect_format, SUPPORTED_EXTENSIONS

app = Flask(__name__)

# Configuration
app.config['MAX_CONTENT_LENGTH'] = 64 * 1024 * 1024  # 64MB max upload
app.config['INSPECTOR_CONFIG'] = Config.load()


def get_inspector_config() -> Config:
    return app.config['INSPECTOR_CONFIG']


def error_response(error: Exception, status: int = 400):
    """Build a JSON error body naming the error type."""
    return jsonify({'error': str(error), 'type': type(error).__name__}), status


# ============== Parse API ==============

@app.route('/api/parse', methods=['POST'])
def api_parse():
    """Decode an uploaded file and return the value tree as JSON."""
    if 'file' not in request.files:
        return jsonify({'error': 'No file uploaded'}), 400

    upload = request.files['file']
    filename = secure_filename(upload.filename or '')
    if not filename:
        return jsonify({'error': 'Missing file name'}), 400

    config = get_inspector_config()

    try:
        # Reject unknown suffixes before reading the upload
        detect_format(filename)
    except RisuFormatError as e:
        return error_response(e)

    try:
        codec = create_codec(config.rpack_map_path)
    except (OSError, ValueError) as e:
        return error_response(e, 500)

    try:
        result = asyncio.run(parse(upload.read(), filename, codec, config))
    except RisuFormatError as e:
        return error_response(e)

    body = dumps(
        result,
        indent=config.json_indent,
        ensure_ascii=config.ensure_ascii,
        bytes_encoding=config.bytes_encoding
    )
    return Response(body, mimetype='application/json')


@app.route('/api/formats')
def api_formats():
    """List supported file extensions."""
    return jsonify({'extensions': list(SUPPORTED_EXTENSIONS)})


@app.route('/api/docs')
def api_docs():
    """API documentation."""
    return jsonify({
        'name': 'RisuAI Inspector API',
        'version': __version__,
        'endpoints': {
            'POST /api/parse': {
                'description': 'Decode a .risum, .risup, .risupreset or .json file',
                'content_type': 'multipart/form-data',
                'fields': {
                    'file': 'file blob (the name suffix selects the decoder)'
                },
                'response': 'decoded value tree',
                'errors': {'error': 'message', 'type': 'error class name'}
            },
            'GET /api/formats': {
                'description': 'List supported file extensions'
            }
        },
        'limits': {
            'max_upload_size': '64 MB'
        }
    })


if __name__ == '__main__':
    config = get_inspector_config()
    if config.rpack_map_path and not Path(config.rpack_map_path).exists():
        print(f"⚠️  RPack map not found: {config.rpack_map_path}")

    print("=" * 60)
    print(f"🔍 RisuAI Inspector Server v{__version__}")
    print("=" * 60)
    print("📍 Parse endpoint: http://localhost:5000/api/parse")
    print("📚 API Docs: http://localhost:5000/api/docs")
    print("=" * 60)

    app.run(host='0.0.0.0', port=5000, debug=False, threaded=True)
