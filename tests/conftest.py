"""
Shared pytest fixtures for all tests.

Database-backed tests run against an in-memory SQLite database through
aiosqlite; the text generation collaborator is always mocked.
"""

import os
from datetime import UTC, datetime, timedelta
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import StaticPool

# Ensure test environment before any settings are read
os.environ["ENVIRONMENT"] = "test"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret")

from storefront.config.settings import Settings  # noqa: E402
from storefront.core.container import DependencyContainer  # noqa: E402
from storefront.core.domain import Viewer  # noqa: E402
from storefront.database import Database  # noqa: E402
from storefront.models.db import Base, CartItem, Category, Product, User  # noqa: E402
from storefront.services import PasswordHasher, TokenService  # noqa: E402

TEST_SECRET = "test-secret"
TEST_PASSWORD = "correct horse battery"


# ============================================================================
# CONFIGURATION
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        JWT_SECRET_KEY=TEST_SECRET,
        BCRYPT_ROUNDS=4,
        DB_CREATE_TABLES=False,
        ENVIRONMENT="test",
    )


# ============================================================================
# DATABASE FIXTURES
# ============================================================================


@pytest_asyncio.fixture
async def async_engine():
    """In-memory SQLite engine with the full schema."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as connection:
        await connection.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def database(async_engine) -> Database:
    return Database(async_engine)


@pytest.fixture
def count_rows(database):
    """Count rows of a model, optionally filtered: ``await count_rows(CartItem, CartItem.user_id == 1)``."""

    async def _count(model, *criteria) -> int:
        async with database.session() as session:
            return await session.scalar(select(func.count()).select_from(model).where(*criteria))

    return _count


@pytest.fixture
def fetch(database):
    """Load a fresh copy of a row by primary key."""

    async def _fetch(model, pk):
        async with database.session() as session:
            return await session.get(model, pk)

    return _fetch


# ============================================================================
# COLLABORATORS
# ============================================================================


@pytest.fixture
def password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def mock_llm() -> AsyncMock:
    """Mock LLM returning a fixed completion."""
    llm = AsyncMock()
    llm.model_name = "test-model"
    llm.generate.return_value = "Generated text"
    return llm


@pytest.fixture
def container(settings, database, token_service, password_hasher, mock_llm) -> DependencyContainer:
    return DependencyContainer(
        settings,
        database=database,
        token_service=token_service,
        password_hasher=password_hasher,
        llm=mock_llm,
    )


# ============================================================================
# TEST DATA
# ============================================================================


@pytest.fixture
def make_user(database, password_hasher):
    async def _make(
        email: str = "layla@example.com",
        password: str = TEST_PASSWORD,
        is_admin: bool = False,
        first_name: str = "Layla",
        last_name: str = "Hassan",
    ) -> User:
        async with database.session() as session:
            user = User(
                email=email,
                password_hash=password_hasher.hash(password),
                first_name=first_name,
                last_name=last_name,
                is_admin=is_admin,
            )
            session.add(user)
        return user

    return _make


@pytest.fixture
def make_category(database):
    async def _make(name: str = "Electronics", parent_id: int | None = None) -> Category:
        async with database.session() as session:
            category = Category(name=name, description=f"{name} products", parent_id=parent_id)
            session.add(category)
        return category

    return _make


@pytest.fixture
def make_product(database):
    """Create products; ``age_minutes`` controls created_at so ordering is deterministic."""

    async def _make(
        name: str = "Headphones",
        price: float = 10.0,
        stock: int = 10,
        is_active: bool = True,
        is_featured: bool = False,
        category_id: int | None = None,
        description: str | None = None,
        original_price: float | None = None,
        age_minutes: int = 0,
    ) -> Product:
        created_at = datetime.now(UTC) - timedelta(minutes=age_minutes)
        async with database.session() as session:
            product = Product(
                name=name,
                price=price,
                original_price=original_price,
                stock_quantity=stock,
                is_active=is_active,
                is_featured=is_featured,
                category_id=category_id,
                description=description,
                created_at=created_at,
                updated_at=created_at,
            )
            session.add(product)
        return product

    return _make


@pytest.fixture
def put_in_cart(database):
    """Insert a cart line directly, bypassing stock checks."""

    async def _put(user: User, product: Product, quantity: int) -> CartItem:
        async with database.session() as session:
            item = CartItem(user_id=user.id, product_id=product.id, quantity=quantity)
            session.add(item)
        return item

    return _put


@pytest.fixture
def viewer_of():
    """Identity the auth middleware would resolve for a user."""

    def _viewer(user: User) -> Viewer:
        return Viewer(id=user.id, email=user.email)

    return _viewer
