"""
Parcel lifecycle service.

Wraps the parcel store with the operations a shipping desk performs on a
parcel: registration, moving it along its status flow, and address changes
or cancellation while it is still registered.
"""

from parcel_tracker.app.core.exceptions import StatusNotAllowedError
from parcel_tracker.app.core.observability import get_logger
from parcel_tracker.app.models.parcel_enums import ParcelStatus
from parcel_tracker.app.schemas.parcel import ParcelCreate, ParcelResponse
from parcel_tracker.app.services.parcel_store import ParcelStore

logger = get_logger("service")


class ParcelService:
    def __init__(self, store: ParcelStore):
        self.store = store

    async def register(self, client: int, address: str) -> ParcelResponse:
        """
        Register a new parcel for ``client`` and return it as stored.
        """
        number = await self.store.add(ParcelCreate(client=client, address=address))
        parcel = await self.store.get(number)

        logger.info(
            "Parcel registered",
            extra={"number": parcel.number, "client": client, "created_at": parcel.created_at}
        )
        return parcel

    async def client_parcels(self, client: int) -> list[ParcelResponse]:
        parcels = await self.store.get_by_client(client)
        logger.info("Client parcels listed", extra={"client": client, "count": len(parcels)})
        return parcels

    async def next_status(self, number: int) -> ParcelStatus:
        """
        Move a parcel one step along REGISTERED → SENT → DELIVERED.

        Delivered parcels are left as they are.

        Raises:
            ValueError: If the stored status is not a ParcelStatus value

        Returns:
            The status the parcel ends up in
        """
        parcel = await self.store.get(number)
        current = ParcelStatus(parcel.status)

        if current == ParcelStatus.DELIVERED:
            logger.info("Parcel already delivered", extra={"number": number})
            return current

        new_status = current.next()
        await self.store.set_status(number, new_status)

        logger.info(
            "Parcel status changed",
            extra={"number": number, "from_status": current.value, "to_status": new_status.value}
        )
        return new_status

    async def change_address(self, number: int, address: str) -> None:
        try:
            await self.store.set_address(number, address)
        except StatusNotAllowedError:
            logger.warning("Address change rejected", extra={"number": number})
            raise
        logger.info("Parcel address changed", extra={"number": number})

    async def delete(self, number: int) -> None:
        try:
            await self.store.delete(number)
        except StatusNotAllowedError:
            logger.warning("Parcel deletion rejected", extra={"number": number})
            raise
        logger.info("Parcel deleted", extra={"number": number})
