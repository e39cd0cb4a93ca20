import logging
import os

from .plugin import main

if __name__ == "__main__":
    logging.basicConfig(level=os.environ.get("PYBASICS_LOG_LEVEL", "WARNING").upper())
    main()
