# run.py
# This script launches the Flask application.
# Because the project is installed in editable mode via pyproject.toml,
# Python knows where to find the 'queenslab' package without any path manipulation.
import logging

from queenslab.app import app
from queenslab.constants import API_HOST, API_PORT

logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')

if __name__ == '__main__':
    # 'debug=True' enables auto-reloading when package files change.
    app.run(host=API_HOST, port=API_PORT, debug=True)
