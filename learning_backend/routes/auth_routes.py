from fastapi import APIRouter, Depends, status
from pydantic import BaseModel

from learning_backend.auth.dependencies import get_current_user
from learning_backend.models.user import User
from learning_backend.schemas import AuthResponse, UserResponse
from learning_backend.services.auth_service import AuthResult, AuthService
from learning_backend.services.providers import get_auth_service

router = APIRouter(tags=['auth'])


class SignupRequest(BaseModel):
    email: str
    password: str
    name: str


class SigninRequest(BaseModel):
    email: str
    password: str


def to_auth_response(message: str, result: AuthResult) -> AuthResponse:
    return AuthResponse(
        message=message,
        token=result.token,
        user=UserResponse.model_validate(result.user),
    )


@router.post('/signup', response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.signup(email=data.email, password=data.password, name=data.name)
    return to_auth_response('User created successfully', result)


@router.post('/signin', response_model=AuthResponse)
def signin(data: SigninRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.signin(email=data.email, password=data.password)
    return to_auth_response('Login successful', result)


@router.get('/me', response_model=UserResponse)
def me(current_user: User = Depends(get_current_user)):
    return current_user
