"""
Text Scorer Backend API Server
Flask application exposing the AI text detection endpoint.
"""
import asyncio
import logging

from flask import Flask, request, jsonify
from flask_cors import CORS
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from text_scorer import AIContentDetector, CompressionUnavailableError, InvalidInputError, config

logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

VERSION = '1.0.0'

app = Flask(__name__)
CORS(app)  # Enable CORS for frontend requests

# Initialize rate limiter
app.config['RATELIMIT_ENABLED'] = config.RATELIMIT_ENABLED
limiter = Limiter(
    app=app,
    key_func=get_remote_address,
    default_limits=[config.DEFAULT_RATE_LIMIT],
    storage_uri="memory://"
)

# Initialize the AI content detector
ai_detector = AIContentDetector()


def error_response(message: str, error_code: str, status: int):
    return jsonify({
        'success': False,
        'error': message,
        'error_code': error_code
    }), status


@app.route('/')
@app.route('/api/health')
def health_check():
    """Health check endpoint with service status."""
    return jsonify({
        'status': 'ok',
        'service': 'Text Scorer API',
        'version': VERSION,
        'compression_fallback': ai_detector.compression_fallback,
        'endpoints': {
            'detect': '/api/detect (POST)',
            'health': '/api/health (GET)'
        }
    })


@app.route('/api/detect', methods=['POST'])
@limiter.limit(config.DETECT_RATE_LIMIT)
def detect_ai_content():
    """
    Estimate whether the given text is AI-generated.

    Request body:
        {
            "text": "The text to analyze",
            "mode": "calibration" (optional),
            "label": "human|ai" (optional, calibration mode only)
        }

    Response (normal mode):
        {
            "ai_probability": 0-1,
            "confidence": "low|medium|high",
            "signals": {...},
            "notes": [...],
            "degraded": false
        }

    Response (calibration mode):
        {
            "label": "human|ai|unlabeled",
            "signals": {...},
            "scores": {"heuristic", "zippy", "detectgpt", "ensemble"}
        }
    """
    data = request.get_json(force=True, silent=True)
    if not isinstance(data, dict):
        return error_response('Invalid JSON body', 'INVALID_JSON', 400)

    text = data.get('text')
    if text is None or (isinstance(text, str) and not text.strip()):
        return error_response('Missing "text"', 'MISSING_TEXT', 400)

    if not isinstance(text, str):
        return error_response('"text" must be a string', 'INVALID_INPUT', 400)

    text = text.strip()
    if len(text) > config.MAX_TEXT_LENGTH:
        return error_response(
            f'Input too long (max {config.MAX_TEXT_LENGTH:,} characters)',
            'INVALID_INPUT',
            400
        )

    try:
        if data.get('mode') == 'calibration':
            result = asyncio.run(ai_detector.calibrate(text, data.get('label')))
        else:
            result = asyncio.run(ai_detector.predict(text))
        return jsonify(result)

    except InvalidInputError as e:
        return error_response(str(e), 'INVALID_INPUT', 400)

    except CompressionUnavailableError as e:
        logger.error(f"Detection failed: {e}")
        return error_response(str(e), 'COMPRESSION_UNAVAILABLE', 503)

    except Exception as e:
        logger.exception("Unexpected error during detection")
        return error_response(f'Internal server error: {str(e)}', 'INTERNAL_ERROR', 500)


if __name__ == '__main__':
    print("Starting Text Scorer API Server...")
    print(f"API available at: http://localhost:{config.PORT}")
    print("\nEndpoints:")
    print("  GET  /api/health          - Health check")
    print("  POST /api/detect          - Score a text")
    print()

    app.run(debug=config.DEBUG, host=config.HOST, port=config.PORT)
