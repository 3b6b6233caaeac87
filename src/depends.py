from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig


def _connect_args(db_uri: str) -> dict:
    # aiosqlite hands the connection to a worker thread
    if db_uri.startswith("sqlite"):
        return {"check_same_thread": False}
    return {}


engine = create_async_engine(
    ApplicationConfig.DB_URI,
    echo=False,
    future=True,
    connect_args=_connect_args(ApplicationConfig.DB_URI),
)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_session() -> AsyncSession:
    """Yield one session per request; the use cases commit or roll back"""
    async with AsyncSessionLocal() as session:
        yield session
