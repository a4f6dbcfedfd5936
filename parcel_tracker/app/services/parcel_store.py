"""
Parcel store: data access for the ``parcel`` table.

Each method issues a single statement through the session it was built with
and commits writes immediately. Storage errors propagate unchanged.
"""

from datetime import datetime, timezone
from typing import Union

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from parcel_tracker.app.core.exceptions import ParcelNotFoundError, StatusNotAllowedError
from parcel_tracker.app.core.observability import get_logger
from parcel_tracker.app.models.parcel import Parcel
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.schemas.parcel import ParcelCreate, ParcelResponse

logger = get_logger("store")


def rfc3339_now() -> str:
    """Current UTC time as an RFC3339 string with second precision."""
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat()


class ParcelStore:
    """
    Repository over the ``parcel`` table.

    Args:
        db: Database session supplied by the caller
    """

    def __init__(self, db: AsyncSession):
        self.db = db

    async def add(self, parcel: Union[ParcelCreate, ParcelResponse]) -> int:
        """
        Insert a new parcel.

        Status is forced to ``registered`` and ``created_at`` to the current
        time, whatever the input carries.

        Returns:
            The number assigned by the database
        """
        result = await self.db.execute(
            insert(Parcel.__table__).values(
                client=parcel.client,
                status=ParcelStatus.REGISTERED.value,
                address=parcel.address,
                created_at=rfc3339_now(),
            )
        )
        number = result.inserted_primary_key[0]
        await self.db.commit()

        logger.debug("Parcel added", extra={"number": number, "client": parcel.client})
        return number

    async def get(self, number: int) -> ParcelResponse:
        """
        Fetch one parcel by number.

        Raises:
            ParcelNotFoundError: If no parcel has this number
        """
        result = await self.db.execute(
            select(Parcel)
            .where(Parcel.number == number)
            .execution_options(populate_existing=True)
        )
        row = result.scalar_one_or_none()

        if row is None:
            raise ParcelNotFoundError(number)

        return ParcelResponse.model_validate(row)

    async def get_by_client(self, client: int) -> list[ParcelResponse]:
        """Return every parcel of ``client``, empty list if there are none."""
        result = await self.db.execute(
            select(Parcel)
            .where(Parcel.client == client)
            .order_by(Parcel.number)
            .execution_options(populate_existing=True)
        )
        return [ParcelResponse.model_validate(row) for row in result.scalars().all()]

    async def set_status(self, number: int, status: Union[ParcelStatus, str]) -> None:
        """
        Overwrite the status of a parcel, regardless of its current one.

        Raises:
            ValueError: If ``status`` is not a known ParcelStatus value
        """
        status = ParcelStatus(status)

        await self.db.execute(
            update(Parcel)
            .where(Parcel.number == number)
            .values(status=status.value)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()
        logger.debug("Parcel status set", extra={"number": number, "status": status.value})

    async def set_address(self, number: int, address: str) -> None:
        """
        Change the address of a parcel that is still ``registered``.

        Raises:
            StatusNotAllowedError: If no registered parcel has this number
        """
        result = await self.db.execute(
            update(Parcel)
            .where(Parcel.number == number, Parcel.status == ParcelStatus.REGISTERED.value)
            .values(address=address)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()

        if result.rowcount == 0:
            raise StatusNotAllowedError(
                "address can only be changed if the parcel is in 'registered' status",
                number=number,
                required_status=ParcelStatus.REGISTERED.value,
            )
        logger.debug("Parcel address set", extra={"number": number})

    async def delete(self, number: int) -> None:
        """
        Delete a parcel that is still ``registered``.

        Raises:
            StatusNotAllowedError: If no registered parcel has this number
        """
        result = await self.db.execute(
            delete(Parcel)
            .where(Parcel.number == number, Parcel.status == ParcelStatus.REGISTERED.value)
            .execution_options(synchronize_session=False)
        )
        await self.db.commit()

        if result.rowcount == 0:
            raise StatusNotAllowedError(
                "parcel can only be deleted if it is in 'registered' status",
                number=number,
                required_status=ParcelStatus.REGISTERED.value,
            )
        logger.debug("Parcel deleted", extra={"number": number})
