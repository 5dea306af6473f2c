"""
Account Use Cases

Registration, login and profile management.
"""

import asyncio
import logging

from storefront.core.domain import (
    EntityNotFoundException,
    InvalidCredentialsException,
    Viewer,
    require_viewer,
)
from storefront.database import Database
from storefront.domains.ecommerce.application.dto import (
    AuthResult,
    LoginRequest,
    RegisterRequest,
    UpdateProfileRequest,
)
from storefront.domains.ecommerce.application.ports import IPasswordHasher, ITokenService
from storefront.domains.ecommerce.infrastructure.repositories import SQLAlchemyUserRepository
from storefront.models.db import User

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """
    Use Case: Register User

    Creates an account with a hashed password and returns an access token for it.
    """

    def __init__(self, database: Database, password_hasher: IPasswordHasher, token_service: ITokenService):
        self.database = database
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, request: RegisterRequest) -> AuthResult:
        """
        Register a new user.

        Raises:
            DuplicateEntityException: If the email is already registered.
        """
        # bcrypt is CPU bound, keep it off the event loop
        password_hash = await asyncio.to_thread(self.password_hasher.hash, request.password)
        async with self.database.session() as session:
            users = SQLAlchemyUserRepository(session)
            user = User(
                email=request.email,
                password_hash=password_hash,
                first_name=request.first_name,
                last_name=request.last_name,
                phone=request.phone,
                address=request.address,
                city=request.city,
            )
            await users.add(user)

        logger.info(f"User registered: id={user.id}")
        return AuthResult(token=self.token_service.issue(user.id, user.email), user=user)


class LoginUseCase:
    """
    Use Case: Login

    Unknown email and wrong password fail identically.
    """

    def __init__(self, database: Database, password_hasher: IPasswordHasher, token_service: ITokenService):
        self.database = database
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, request: LoginRequest) -> AuthResult:
        async with self.database.session() as session:
            user = await SQLAlchemyUserRepository(session).get_by_email(request.email)

        digest = user.password_hash if user is not None else None
        matches = await asyncio.to_thread(self.password_hasher.verify, request.password, digest)
        if user is None or not matches:
            logger.info("Login rejected")
            raise InvalidCredentialsException()

        return AuthResult(token=self.token_service.issue(user.id, user.email), user=user)


class GetCurrentUserUseCase:
    """Use Case: profile of the calling user."""

    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None) -> User:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            user = await SQLAlchemyUserRepository(session).get_by_id(viewer.id)
        if user is None:
            raise EntityNotFoundException("User", viewer.id)
        return user


class UpdateProfileUseCase:
    """Use Case: update the calling user's profile. Only supplied fields change."""

    def __init__(self, database: Database):
        self.database = database

    async def execute(self, viewer: Viewer | None, request: UpdateProfileRequest) -> User:
        viewer = require_viewer(viewer)
        async with self.database.session() as session:
            users = SQLAlchemyUserRepository(session)
            user = await users.get_by_id(viewer.id)
            if user is None:
                raise EntityNotFoundException("User", viewer.id)

            for field_name, value in request.model_dump(exclude_none=True).items():
                setattr(user, field_name, value)
            await users.save(user)

        return user
