from fastapi import APIRouter
from engine.routes.image_routes import image_router



router = APIRouter()
router.include_router(image_router, prefix="/image", tags=["image"])
