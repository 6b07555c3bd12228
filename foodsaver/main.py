import uvicorn
from foodsaver.api.api_run import app
from foodsaver.utilities.config import APP_HOST, APP_PORT, LOG_LEVEL, configure_logging


def main():
    configure_logging()
    local_url = f"http://localhost:{APP_PORT}"
    # Print a friendly message that points to the URL you can open in a browser
    print(f"Uvicorn running on {local_url} (Press CTRL+C to quit)")
    uvicorn.run(app, host=APP_HOST, port=APP_PORT, log_level=LOG_LEVEL.lower())


if __name__ == "__main__":
    main()
