import logging

import uvicorn

from toys_kingdom.config import settings
from toys_kingdom.main import app

logger = logging.getLogger("toys_kingdom")


def main():
    logger.info(f"Toys kingdom server is running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
