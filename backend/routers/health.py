from fastapi import APIRouter, HTTPException, Request

from errors import StorageError

router = APIRouter(tags=["Health"])

@router.get("/health",
         summary="Health check",
         description="Checks the database connection and returns the application's health status.")
def health_check(request: Request):
    """
    Health endpoint to check database connection.
    """
    try:
        request.app.state.goal_store.ping()
        return {"status": "healthy"}
    except StorageError:
        raise HTTPException(status_code=503, detail="Database connection failed")
