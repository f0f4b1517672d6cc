#!/usr/bin/env python3
"""
Slider Gap Locator API Server
Decodes a background / slider pair and returns the x offset of the gap.
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

from flask import Flask, request, jsonify
from flask_cors import CORS

# --- Centralized Logging Configuration ---
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
    datefmt='%H:%M:%S'
)

from slider_gap.services.gap_locator_service import GapLocatorService
from slider_gap.services.request_service import parse_locate_request

app = Flask(__name__)
CORS(app)  # Enable CORS for browser-side callers

# Configuration
MAX_CONTENT_LENGTH = int(os.getenv("MAX_UPLOAD_SIZE_MB", "10")) * 1024 * 1024
API_HOST = os.getenv("API_HOST", "0.0.0.0")
API_PORT = int(os.getenv("API_PORT", "5000"))

app.config['MAX_CONTENT_LENGTH'] = MAX_CONTENT_LENGTH

# Initialize services
gap_locator_service = GapLocatorService()

logger = logging.getLogger(__name__)


@app.route('/', methods=['POST'])
@app.route('/api/locate-gap', methods=['POST'])
def locate_gap():
    """Locate the gap column for one background / slider pair."""
    data = request.get_json(silent=True)
    try:
        bg_payload, slider_payload, slider_y = parse_locate_request(data)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    try:
        result = gap_locator_service.locate_base64(bg_payload, slider_payload, slider_y)
    except ValueError as e:
        logger.warning(f"Rejected undecodable image: {e}")
        return jsonify({'error': f'Invalid image: {e}'}), 400
    except Exception as e:
        logger.error(f"Gap location error: {e}")
        return jsonify({'error': 'Error locating gap'}), 500

    if data.get('detailed'):
        return jsonify(result.as_dict()), 200
    return jsonify({'x': result.x}), 200


@app.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    return jsonify({
        'status': 'healthy',
        'message': 'Slider Gap Locator API is running',
        'edge_margin': gap_locator_service.EDGE_MARGIN,
        'drop_threshold': gap_locator_service.DROP_THRESHOLD
    })


@app.errorhandler(405)
def method_not_allowed(e):
    """Handle wrong HTTP method."""
    return jsonify({'error': 'Method Not Allowed'}), 405


@app.errorhandler(413)
def too_large(e):
    """Handle request too large error."""
    return jsonify({'error': f'Request too large. Maximum size is {MAX_CONTENT_LENGTH // (1024*1024)}MB.'}), 413


@app.errorhandler(500)
def internal_error(e):
    """Handle internal server error."""
    logger.error(f"Internal server error: {e}")
    return jsonify({'error': 'Internal server error'}), 500


if __name__ == '__main__':
    print("🚀 Starting Slider Gap Locator API Server...")
    print(f"🔧 Max request size: {MAX_CONTENT_LENGTH // (1024*1024)}MB")
    print(f"🔧 Edge margin: {gap_locator_service.EDGE_MARGIN}px, drop threshold: {gap_locator_service.DROP_THRESHOLD}")
    print("🌐 CORS enabled")
    print("📋 Endpoints:")
    print("   POST /api/locate-gap")
    print("   GET  /api/health")
    print("="*60)

    app.run(host=API_HOST, port=API_PORT, debug=False)
