from fastapi import FastAPI
from app.logging_config import setup_logging

setup_logging()

from app.dependencies import settings
from app.routers import dialogflow

app = FastAPI()

# Include Routers
app.include_router(dialogflow.router)

@app.get("/")
def read_root():
    return {"message": "Support webhook is ready"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=settings.port)
