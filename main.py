from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from hueforge.api.v1 import router as v1_router
from hueforge.config import config

app = FastAPI(
    title="HueForge",
    description="Palette optimization and editor theme generation",
    version=config.API_VERSION
)

# Add CORS middleware with basic configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.allowed_origins() or ["http://localhost:3000", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.include_router(v1_router)


@app.get("/")
def root():
    return {"service": "hueforge", "version": config.API_VERSION, "docs": "/docs"}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
