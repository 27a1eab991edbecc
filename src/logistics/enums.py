"""Wire-level enumerations for the ECPay logistics API.

Values are exactly what the remote service expects in the request body.
"""

from enum import Enum


class LogisticsType(Enum):
    CVS = "CVS"
    HOME = "Home"


class LogisticsSubType(Enum):
    # Convenience store, store-to-store (C2C)
    UNIMART_C2C = "UNIMARTC2C"
    FAMI_C2C = "FAMIC2C"
    HILIFE_C2C = "HILIFEC2C"
    OKMART_C2C = "OKMARTC2C"

    # Convenience store, merchant-to-store (B2C)
    UNIMART = "UNIMART"
    FAMI = "FAMI"
    HILIFE = "HILIFE"

    # Home delivery
    TCAT = "TCAT"
    POST = "POST"

    @property
    def is_c2c(self) -> bool:
        return self in _C2C

    @property
    def is_b2c(self) -> bool:
        return self in _B2C

    @property
    def is_cvs(self) -> bool:
        return self in _C2C or self in _B2C

    @property
    def is_home(self) -> bool:
        return self in _HOME

    @classmethod
    def values(cls, predicate=None) -> frozenset[str]:
        """Return the wire values of every member matching ``predicate``."""
        return frozenset(member.value for member in cls if predicate is None or predicate(member))


_C2C = {
    LogisticsSubType.UNIMART_C2C,
    LogisticsSubType.FAMI_C2C,
    LogisticsSubType.HILIFE_C2C,
    LogisticsSubType.OKMART_C2C,
}
_B2C = {LogisticsSubType.UNIMART, LogisticsSubType.FAMI, LogisticsSubType.HILIFE}
_HOME = {LogisticsSubType.TCAT, LogisticsSubType.POST}


class IsCollection(Enum):
    NO = "N"
    YES = "Y"


class Device(Enum):
    PC = 0
    MOBILE = 1


class Distance(Enum):
    SAME = "00"
    OTHER = "01"
    ISLAND = "02"


class Temperature(Enum):
    ROOM = "0001"
    REFRIGERATION = "0002"
    FREEZE = "0003"


class Specification(Enum):
    SIZE_60 = "0001"
    SIZE_90 = "0002"
    SIZE_120 = "0003"
    SIZE_150 = "0004"


class ScheduledPickupTime(Enum):
    BEFORE_13 = "1"
    BETWEEN_14_18 = "2"
    UNLIMITED = "4"


class ScheduledDeliveryTime(Enum):
    BEFORE_13 = "1"
    BETWEEN_14_18 = "2"
    UNLIMITED = "4"


class StoreType(Enum):
    PICKUP_ONLY = "01"
    PICKUP_AND_RETURN = "02"
    RETURN_ONLY = "03"
