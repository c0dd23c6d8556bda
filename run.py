import logging

import uvicorn

from app.config import PORT

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

if __name__ == "__main__":
    logging.info(f"Server running on http://localhost:{PORT}")
    uvicorn.run("app.main:app", host="0.0.0.0", port=PORT)
