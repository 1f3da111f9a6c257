"""API routes."""

from fastapi import APIRouter

from contactbook.api.routes import auth, contacts

api_router = APIRouter()

api_router.include_router(auth.router, prefix="/auth", tags=["auth"])

# index and show are public; the other contact actions require a bearer token
api_router.include_router(contacts.router, prefix="/contacts", tags=["contacts"])
