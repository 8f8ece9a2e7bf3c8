from pydantic import BaseModel


class AuthenticatedUser(BaseModel):
    """DTO for the identity behind a webview request"""
    id: str
