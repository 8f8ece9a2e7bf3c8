# Standard library imports
from typing import Optional

# Local application imports
from ....core.security import decode_jwt_token
from ...dto.auth_dto import AuthenticatedUser


class GetCurrentUserUseCase:
    """Use case for resolving the authenticated user from a webview JWT"""

    async def execute(self, token: str) -> AuthenticatedUser:
        """
        Get current user from JWT token

        Args:
            token: JWT access token issued for the webview

        Returns:
            AuthenticatedUser with the user ID

        Raises:
            ValueError: If token is invalid or carries no user ID
        """
        try:
            payload = decode_jwt_token(token)
        except Exception as exception:
            raise ValueError(f"Invalid or expired token: {str(exception)}")

        user_id: Optional[str] = payload.get("sub")
        if not user_id:
            raise ValueError("Invalid authentication payload: missing user ID")

        return AuthenticatedUser(id=user_id)
