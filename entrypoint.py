"""Serve the dividend calculator API with uvicorn (port from BACKEND_PORT)."""
import os
import uvicorn

from divcalc.main import app


def main() -> None:
    host = os.environ.get("BACKEND_HOST", "127.0.0.1")
    port = int(os.environ.get("BACKEND_PORT", "8001"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
