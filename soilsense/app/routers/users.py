"""
Read-only user lookup; the password field never leaves this module.
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from soilsense.app.di import get_user_directory
from soilsense.app.schemas import UserResponse
from soilsense.core.adapters.base import UserDirectory

router = APIRouter(tags=["users"], prefix="/api/users")

HIDDEN_FIELDS = ("password",)

def _public(user: Dict[str, Any]) -> Dict[str, Any]:
    return {k: v for k, v in user.items() if k not in HIDDEN_FIELDS}

def _respond(user: Optional[Dict[str, Any]]):
    if not user:
        return JSONResponse(status_code=404, content={"success": False, "message": "User not found"})
    return UserResponse(user=_public(user))

@router.get("/by-id/{user_id}", response_model=UserResponse)
async def user_by_id(user_id: str, users: UserDirectory = Depends(get_user_directory)):
    return _respond(await users.find_by_id(user_id))

@router.get("/{email}", response_model=UserResponse)
async def user_by_email(email: str, users: UserDirectory = Depends(get_user_directory)):
    return _respond(await users.find_by_email(email.lower().strip()))
