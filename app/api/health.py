from fastapi import APIRouter

router = APIRouter()

@router.get("")
@router.get("/status")
async def health_status():
    """Health check endpoint"""
    return {
        "status": "ok",
        "message": "Server is running"
    }
