"""
Parcel Status Enumeration.
"""

import enum


class ParcelStatus(str, enum.Enum):
    """
    Parcel status enumeration.
    
    Status flow:
        REGISTERED → SENT → DELIVERED
        Address changes and deletion are only allowed while REGISTERED.
    """
    REGISTERED = "registered"
    SENT = "sent"
    DELIVERED = "delivered"

    def next(self) -> "ParcelStatus":
        """Return the following status; DELIVERED is terminal."""
        order = list(ParcelStatus)
        index = order.index(self)
        return order[min(index + 1, len(order) - 1)]
