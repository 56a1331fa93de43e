import pytest
from sqlalchemy.exc import OperationalError

from starledger.core.errors import StorageError
from starledger.db.models import HandleBinding
from starledger.infrastructure.database import session_scope, translate_storage_errors


def test_translate_storage_errors_hides_driver_text():
    with pytest.raises(StorageError) as excinfo:
        with translate_storage_errors("lookup"):
            raise OperationalError("SELECT 1", {}, Exception("database is locked"))

    assert excinfo.value.message == "Server error"
    assert isinstance(excinfo.value.__cause__, OperationalError)


def test_translate_storage_errors_passes_other_errors_through():
    with pytest.raises(KeyError):
        with translate_storage_errors("lookup"):
            raise KeyError("x")


async def test_session_scope_commits(session_factory):
    async with session_scope(session_factory) as session:
        session.add(HandleBinding(external_id="1", handle="00000001"))

    async with session_factory() as session:
        assert await session.get(HandleBinding, "1") is not None


async def test_session_scope_rolls_back_on_error(session_factory):
    with pytest.raises(RuntimeError):
        async with session_scope(session_factory) as session:
            session.add(HandleBinding(external_id="1", handle="00000001"))
            await session.flush()
            raise RuntimeError("boom")

    async with session_factory() as session:
        assert await session.get(HandleBinding, "1") is None


async def test_session_scope_maps_commit_failures(session_factory):
    async with session_factory() as session:
        session.add(HandleBinding(external_id="1", handle="00000001"))
        await session.commit()

    with pytest.raises(StorageError):
        async with session_scope(session_factory) as session:
            session.add(HandleBinding(external_id="2", handle="00000001"))
