from flask import jsonify
from . import site_bp


@site_bp.route('/ping', methods=['GET'])
def ping():
    return 'pong 🏓', 200, {"Content-Type": "text/plain; charset=utf-8"}


@site_bp.route('/health', methods=['GET'])
def health_check():
    return jsonify({
        "status": "ok",
        "service": "company-site"
    })
