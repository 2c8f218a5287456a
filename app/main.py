# app/main.py

import uvicorn

from app import create_app

app = create_app()


@app.get("/", tags=["Health"])
def health():
    """Comprobación simple para el balanceador."""
    return {"status": "ok", "service": app.title}


if __name__ == "__main__":
    uvicorn.run("app.main:app", host="127.0.0.1", port=8000)
