# main.py

import uvicorn
from receipt_processor.config.logging_config import configure_logging
from receipt_processor.config.settings import HOST, PORT, RELOAD

# Configure logging first
logger = configure_logging()

def main():
    logger.info(f"Starting receipt processor on http://{HOST}:{PORT}")
    # Import string so reload can re-import the app
    uvicorn.run(
        "receipt_processor.routes.api:app",
        host=HOST,
        port=PORT,
        reload=RELOAD,
        log_config=None,  # Disable uvicorn's default logging
    )

if __name__ == "__main__":
    main()
