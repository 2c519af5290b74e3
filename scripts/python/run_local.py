"""Run the API locally with auto-reload and the development config."""

import os

import uvicorn


def main() -> None:
    """Run the server against config/environments/development."""
    os.environ.setdefault("APP_ENV", "development")
    uvicorn.run("recipebox.main:app", host="127.0.0.1", port=8000, reload=True)


if __name__ == "__main__":
    main()
