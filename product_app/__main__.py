"""Run the API with uvicorn: python -m product_app"""
import uvicorn

from product_app.core.config import settings


def main():
    uvicorn.run(
        "product_app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
