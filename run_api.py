#!/usr/bin/env python3
"""Launcher script for the REST API server."""

import uvicorn
import os
from fastwild.api import app, set_config
from fastwild.config import Config


if __name__ == "__main__":
    config = Config()
    ok, errors = config.validate()
    if not ok:
        for error in errors:
            print(f"Config error: {error}")
        raise SystemExit(2)
    set_config(config)

    api_port = int(os.getenv('API_PORT', '8080'))
    print(f"Starting API server on port {api_port}")

    try:
        uvicorn.run(app, host="0.0.0.0", port=api_port)
    except KeyboardInterrupt:
        print("\nShutting down...")
