import logging

from fastapi import APIRouter, Depends, HTTPException, Request, Response, status

from wordrecall.application.identity.use_cases.register_user_use_case import (
    RegisterUserUseCase,
)
from wordrecall.core import container
from wordrecall.domain.common.exceptions import DomainError
from wordrecall.domain.identity.entities.user import User
from wordrecall.domain.identity.exceptions import (
    EmailAlreadyExistsError,
    RegistrationDisabledError,
)
from wordrecall.exceptions import WordRecallError
from wordrecall.infrastructure.common.di import inject_use_case
from wordrecall.infrastructure.common.rate_limit import limiter
from wordrecall.infrastructure.identity.dependencies import CurrentUser
from wordrecall.infrastructure.identity.routers.auth import set_refresh_cookie
from wordrecall.infrastructure.identity.schemas import UserDetailsResponse, UserRegisterRequest
from wordrecall.infrastructure.identity.services.token_service import TokenWithRefresh

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["users"])


def _to_details(user: User) -> UserDetailsResponse:
    return UserDetailsResponse(
        id=user.id.value, email=user.email, name=user.name, display_name=user.display_name
    )


@router.post("/register", status_code=status.HTTP_201_CREATED)
@limiter.limit("5/minute")
async def register(
    request: Request,
    response: Response,
    register_data: UserRegisterRequest,
    use_case: RegisterUserUseCase = Depends(inject_use_case(container.register_user_use_case)),
) -> TokenWithRefresh:
    """
    Register a new user account.

    Returns a token pair so the user is logged in straight away.
    """
    try:
        _, token_pair = use_case.register_user(
            register_data.email, register_data.password, register_data.name
        )
        set_refresh_cookie(response, token_pair.refresh_token)
        return token_pair
    except RegistrationDisabledError:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="User registration is currently disabled",
        ) from None
    except EmailAlreadyExistsError:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Email already registered",
        ) from None
    except (WordRecallError, DomainError, HTTPException):
        # Handled by the app's exception handlers
        raise
    except Exception as e:
        logger.error(f"Failed to register user: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="An unexpected error occurred. Please try again later.",
        ) from e


@router.get("/me")
async def get_me(current_user: CurrentUser) -> UserDetailsResponse:
    """Get the current user's profile information."""
    return _to_details(current_user)
