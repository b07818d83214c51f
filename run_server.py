#!/usr/bin/env python3
"""
Use Case Validator Server

Simple Flask server to trigger validation runs outside of GitHub Actions.
"""

from use_case_validator.server import create_app

app = create_app()

if __name__ == '__main__':
    print("🚀 Starting Use Case Validator Server...")
    print("📍 Server will be available at: http://localhost:8000")
    print("📋 API Documentation:")
    print("   - Health Check: GET /api/v1/health")
    print("   - Validate PR: POST /api/v1/validations")

    app.run(
        host='0.0.0.0',
        port=8000,
        debug=False
    )
