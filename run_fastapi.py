"""
Main entry point for the FastAPI application.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn chat_backend.fastapi_app:app --host 0.0.0.0 --port 3000 --reload
"""

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

from chat_backend.config.settings import Config

if __name__ == "__main__":
    print(f"Starting FastAPI application (storage: {Config.STORAGE_BACKEND})...")
    print(f"Server running on http://{Config.HOST}:{Config.PORT}")
    print(f"API docs available at http://{Config.HOST}:{Config.PORT}/docs")

    uvicorn.run(
        "chat_backend.fastapi_app:app",
        host=Config.HOST,
        port=Config.PORT,
        reload=Config.DEBUG,
        log_level="info" if Config.DEBUG else "warning",
    )
