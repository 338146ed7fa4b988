# run.py
# Starts the dungeon lab web API on the host and port from dungeonlab.constants.

import logging

from dungeonlab.app import app
from dungeonlab.constants import SERVER_HOST, SERVER_PORT

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
    # Auto-reload on backend changes.
    app.run(host=SERVER_HOST, port=SERVER_PORT, debug=True)
