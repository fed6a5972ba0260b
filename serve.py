#!/usr/bin/env python3
"""
Static file server for the portfolio page.
Run from the repo root:
    python serve.py
Then open: http://localhost:3000
"""
import logging

from portfolio.app import create_app

if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    app = create_app()
    port = app.config["PORT"]
    print(f"\n  Server running on http://localhost:{port}\n")
    app.run(host=app.config["HOST"], port=port, use_reloader=False)
