import uvicorn
from .config import settings
from .utils.logging import logger

if __name__ == "__main__":
    logger.info("Server is running at %s:%s", settings.HOST, settings.PORT)
    uvicorn.run("receipt_points.main:app", host=settings.HOST, port=settings.PORT,
                log_level=settings.LOG_LEVEL.lower())
